import itertools as it, operator as op, functools as ft
from collections import namedtuple

from .. import utils as u


### MetroRoutingEngine input data

# Station records are keyed by (label, line) pairs, with one record
#  for each line serving the same physical station, connected to each other
#  by zero-distance interchange edges in the graph.


@u.attr_struct(repr=False, eq=False)
class Station:
	label = u.attr_init()
	line = u.attr_init(None)

	name_sep = '~'

	@property
	def name(self):
		if not self.line: return self.label
		return '{}{}{}'.format(self.label, self.name_sep, self.line)

	@classmethod
	def parse(cls, name):
		'Create Station from display name, e.g. "Rajiv Chowk~B".'
		if isinstance(name, cls): return name
		if isinstance(name, tuple): return cls(*name)
		label, sep, line = name.rpartition(cls.name_sep)
		if not sep: label, line = line, None
		return cls(label.strip(), line.strip() if line else None)

	@property
	def key(self): return self.label, self.line or ''

	def is_interchange_with(self, station):
		return self.label == station.label and self.key != station.key

	def __hash__(self): return hash(self.key)
	def __eq__(self, station):
		return isinstance(station, Station) and self.key == station.key
	def __repr__(self): return '<Station {}>'.format(self.name)


### MetroRoutingEngine query results

@u.attr_struct
class Route:
	'''Ordered sequence of Stations from source to destination (inclusive),
		with total weight (distance or time) of all edges between them.
		Empty route with zero weight is used for unreachable destinations.'''
	stations = u.attr_init(tuple, converter=tuple)
	weight = u.attr_init(0)

	def __len__(self): return len(self.stations)
	def __iter__(self): return iter(self.stations)
	def __bool__(self): return bool(self.stations)


RouteStop = namedtuple('RouteStop', 'label lines')

@u.attr_struct(frozen=True)
class AnnotatedRoute:
	src = u.attr_init(None)
	dst = u.attr_init(None)
	interchanges = u.attr_init(0)
	stops = u.attr_init(tuple, converter=tuple)
	path = u.attr_init(tuple, converter=tuple)
	weight = u.attr_init(0)
	metric = u.attr_init('distance')

	@property
	def labels(self): return list(map(op.attrgetter('label'), self.stops))

	def weight_format(self):
		if self.metric == 'time': return u.dt_format(self.weight)
		return u.km_format(self.weight)

	def __len__(self): return len(self.stops)
	def __iter__(self): return iter(self.stops)
	def __bool__(self): return bool(self.path)

	def pretty_print(self, indent=0, **print_kws):
		p = lambda tpl,*a,**k: print(' '*indent + tpl.format(*a,**k), **print_kws)
		stop_str = lambda stop: '{} [{}]'.format(
			stop.label, ' -> '.join(filter(None, stop.lines)) or '-' )
		if not self:
			p('Route: no path found')
			return
		p('SOURCE STATION : {}', self.src.label)
		p('DESTINATION STATION : {}', self.dst.label)
		p('NUMBER OF INTERCHANGES : {}', self.interchanges)
		p('~~~~~~~~~~~~~')
		for n, stop in enumerate(self.stops):
			start, end = n == 0, n == len(self.stops) - 1
			if start: p('START  ==>  {}', stop_str(stop))
			if end: p('{}   ==>    END', stop_str(stop))
			if not (start or end): p('{}', stop_str(stop))
		p('~~~~~~~~~~~~~')
		p('{}: {}', self.metric.title(), self.weight_format())
