import itertools as it, operator as op, functools as ft
import os, logging, datetime, pathlib
import contextlib, tempfile, stat

import attr


class LogMessage:
	def __init__(self, fmt, a, k): self.fmt, self.a, self.k = fmt, a, k
	def __str__(self): return self.fmt.format(*self.a, **self.k) if self.a or self.k else self.fmt

class LogStyleAdapter(logging.LoggerAdapter):
	def __init__(self, logger, extra=None):
		super(LogStyleAdapter, self).__init__(logger, extra or {})
	def log(self, level, msg, *args, **kws):
		if not self.isEnabledFor(level): return
		log_kws = {} if 'exc_info' not in kws else dict(exc_info=kws.pop('exc_info'))
		msg, kws = self.process(msg, kws)
		self.logger._log(level, LogMessage(msg, args, kws), (), log_kws)

get_logger = lambda name: LogStyleAdapter(logging.getLogger(name))


_log_lines_seq = it.count(1)

def log_lines(log_func, lines):
	'''Log each (fmt, *args) tuple in lines via log_func,
		with same "[#N]" tag on all of them, to keep them grouped in interleaved output.'''
	tag = '#{}'.format(next(_log_lines_seq))
	for fmt, *args in lines: log_func('[{}] ' + fmt, tag, *args)


def attr_struct(cls=None, vals_to_attrs=False, defaults=..., **kws):
	if not cls:
		return ft.partial( attr_struct,
			vals_to_attrs=vals_to_attrs, defaults=defaults, **kws )
	try:
		keys = cls.keys
		del cls.keys
	except AttributeError: keys = list()
	else:
		attr_kws = dict()
		if defaults is not ...: attr_kws['default'] = defaults
		if isinstance(keys, str): keys = keys.split()
		for k in keys: setattr(cls, k, attr.ib(**attr_kws))
	if vals_to_attrs:
		for k, v in list(vars(cls).items()):
			if k.startswith('_') or k in keys or callable(v): continue
			setattr(cls, k, attr.ib(v))
	kws.setdefault('hash', not hasattr(cls, '__hash__'))
	kws.setdefault('slots', True)
	return attr.s(cls, **kws)

def attr_init(factory_or_default=attr.NOTHING, **attr_kws):
	if callable(factory_or_default): factory_or_default = attr.Factory(factory_or_default)
	return attr.ib(default=factory_or_default, **attr_kws)


p = ft.partial(print, flush=True)

inf = float('inf')


@contextlib.contextmanager
def safe_replacement(path, mode='w'):
	'''Yield temp file in the same dir as path, which is renamed
		over path only if with-block exits without errors, or removed otherwise.
		Permissions of the replaced file (if any) are kept.'''
	path = pathlib.Path(path)
	tmp = tempfile.NamedTemporaryFile(
		mode, dir=str(path.parent), prefix=path.name + '.', delete=False )
	try:
		with tmp:
			try: os.fchmod(tmp.fileno(), stat.S_IMODE(path.stat().st_mode))
			except OSError: pass
			yield tmp
		os.replace(tmp.name, str(path))
	finally:
		if os.path.exists(tmp.name): os.unlink(tmp.name)


def dt_format(dt):
	'Format time-delta in seconds as [H:]MM:SS string.'
	dt = datetime.timedelta(seconds=int(round(dt)))
	dt_str = str(dt)
	if dt_str.startswith('0:'): dt_str = dt_str[2:]
	return dt_str

def km_format(km):
	return '{:,.1f} km'.format(km) if km != int(km) else '{:,d} km'.format(int(km))
