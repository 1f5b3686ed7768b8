import unittest

from . import test_simple, test_graph, test_delhi


def load_tests(loader=None, tests=None, pattern=None):
	if not loader: loader = unittest.defaultTestLoader
	if not tests: tests = unittest.TestSuite()
	for mod in test_graph, test_simple, test_delhi:
		tests.addTests(loader.loadTestsFromModule(mod))
	return tests

class SpecificTestCasePicker:
	def __init__(self): self.suite = load_tests()
	def __getattr__(self, k):
		for test_case in self.suite:
			for test in test_case:
				if test._testMethodName == k: return lambda: test
		raise AttributeError('No such test case: {}'.format(k))
case = SpecificTestCasePicker()
