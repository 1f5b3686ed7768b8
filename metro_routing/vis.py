# Visualization/display tools for station graphs and routes

import itertools as it, operator as op, functools as ft
from collections import defaultdict
import contextlib

from . import utils as u


print_fmt = lambda tpl, *a, file=None, end='\n', **k:\
	print(tpl.format(*a,**k), file=file, end=end)

dot_str = lambda n: '"{}"'.format(n.replace('"', '\\"'))
dot_html = lambda n: '<{}>'.format(n)


@contextlib.contextmanager
def dot_graph(dst, dot_opts, indent=2, graph_type='graph'):
	print_fmt('{} {{', graph_type, file=dst)
	if isinstance(indent, int): indent = ' '*indent
	p = lambda tpl, *a, end='\n', **k:\
		print_fmt(indent + tpl, *a, file=dst, end=end, **k)
	p('### Defaults')
	for t, opts in (dot_opts or dict()).items():
		p('{} [ {} ]'.format(t, ', '.join('{}={}'.format(k, v) for k, v in opts.items())))
	yield p
	print_fmt('}}', file=dst)


def dot_for_network(graph, dst, dot_opts=None):
	'''Dump undirected graph of physical stations (grouping all
		same-label records into one node) in graphviz dot format.'''
	label_lines, label_edges = defaultdict(list), dict()
	for station in graph: label_lines[station.label].append(station.line or '')
	for a, b, km in graph.edges():
		if a.label == b.label: continue
		label_edges[tuple(sorted([a.label, b.label]))] = a.line or '', km

	with dot_graph(dst, dot_opts) as p:
		names = dict()

		p('')
		p('### Labels')
		for n, (label, lines) in enumerate(label_lines.items()):
			html = '<b>{}</b>{}'.format(label, '<br/>- '.join([''] + lines))
			name = names[label] = 'station-{}'.format(n)
			p('{} [label={}]'.format(dot_str(name), dot_html(html)))

		p('')
		p('### Edges')
		for (a, b), (line, km) in label_edges.items():
			p( '{} -- {} [label={}]', *map(dot_str,
				[names[a], names[b], '{}: {}'.format(line, u.km_format(km))]) )


def station_list_lines(graph, line_names=None):
	'Numbered station list, with line display names from line_names mapping, if any.'
	yield '*' * 71
	for n, station in enumerate(graph, 1):
		line_name = (line_names or dict()).get(station.line)
		yield '{}. {}'.format(n, station.name) + (' ({})'.format(line_name) if line_name else '')
	yield '*' * 71

def adjacency_lines(graph):
	yield '\t Metro Map'
	yield '\t------------------'
	yield '-' * 52
	for station in graph:
		yield '{} =>'.format(station.name)
		for nbr, km in graph[station].items():
			name = nbr.name
			pad = '\t' * (1 + (len(name) < 16) + (len(name) < 8))
			yield '\t{}{}{}'.format(name, pad, km)
	yield '\t------------------'
	yield '-' * 51

def print_lines(lines, file=None):
	for line in lines: print_fmt('{}', line, file=file)
