import itertools as it, operator as op, functools as ft
from collections import namedtuple
import heapq

from . import utils as u, types as t, dataset


@u.attr_struct(vals_to_attrs=True)
class EngineConf:
	# Edge time = distance / speed + dwell_delta, or + delta_ch for interchange edges
	speed_kmh = 90 # same as 40s per km
	dwell_delta = 2*60 # fixed time-delta for each hop between stations on the same line
	delta_ch = 5*60 # fixed time-delta overhead for changing lines on the same station

	# Show interchange station records as a single stop in annotated routes
	collapse_interchanges = True

	def check(self):
		'Raise ValueError for values that cannot produce valid time-delta weights.'
		for k in 'speed_kmh', 'dwell_delta', 'delta_ch':
			v = getattr(self, k)
			if isinstance(v, bool) or not isinstance(v, (int, float)):
				raise ValueError('EngineConf.{} must be a number, not {!r}'.format(k, v))
		if not self.speed_kmh > 0:
			raise ValueError('EngineConf.speed_kmh must be positive: {!r}'.format(self.speed_kmh))
		for k in 'dwell_delta', 'delta_ch':
			if getattr(self, k) < 0:
				raise ValueError('EngineConf.{} must not be negative: {!r}'.format(k, getattr(self, k)))
		return self


def timer(self_or_func, func=None, *args, **kws):
	'Calculation call wrapper for timer/progress logging.'
	if not func: return lambda s,*a,**k: s.timer_wrapper(self_or_func, s, *a, **k)
	return self_or_func.timer_wrapper(func, *args, **kws)


# (weight, idx) prefix is unique per queued label, so stations never get compared
StationLabel = namedtuple('StationLabel', 'weight idx station')

def shortest_path(graph, station_src, station_dst):
	'''Dijkstra shortest-path search between two stations on a Graph,
			stopping as soon as station_dst weight is finalized.
		Stations with equal tentative weights are processed in graph insertion order.
		Returns Route, which is empty (with zero weight) if station_dst is unreachable.'''
	src, dst = graph.get(station_src), graph.get(station_dst)

	weights, prev, done = {src: 0}, dict(), set()
	queue = [StationLabel(0, graph.index(src), src)]

	while queue:
		weight, idx, station = heapq.heappop(queue)
		if station in done: continue # stale queue entry
		done.add(station)
		if station == dst: break
		for nbr, edge_weight in graph.neighbors(station).items():
			if nbr in done: continue
			nbr_weight = weight + edge_weight
			if nbr_weight < weights.get(nbr, u.inf):
				weights[nbr], prev[nbr] = nbr_weight, station
				heapq.heappush(queue, StationLabel(nbr_weight, graph.index(nbr), nbr))
	else: return t.public.Route() # dst was never reached

	stations = [dst]
	while stations[-1] != src: stations.append(prev[stations[-1]])
	return t.public.Route(reversed(stations), weights[dst])


def time_graph(graph, conf=None):
	'''Return new Graph with same stations/edges as distance-weighted one,
		but with time-delta weights (seconds), calculated using EngineConf values.
		Raises ValueError if EngineConf values are out of range.'''
	conf = (conf or EngineConf()).check()
	def edge_time(a, b, km):
		dt = km / conf.speed_kmh * 3600
		return dt + (conf.delta_ch if a.is_interchange_with(b) else conf.dwell_delta)
	return graph.map_weights(edge_time)


def annotate_route(route, metric='distance', collapse=True):
	'''Build AnnotatedRoute from Route, counting interchanges between lines,
			i.e. number of consecutive station pairs with different line codes.
		With collapse=True, same-label station records are merged into
			one RouteStop, otherwise each of these is a separate RouteStop.'''
	path = tuple(route)
	if not path: return t.public.AnnotatedRoute(metric=metric)

	interchanges, stops = 0, list()
	for station_prev, station in zip((None,) + path, path):
		if station_prev and (station_prev.line or '') != (station.line or ''): interchanges += 1
		if collapse and stops and stops[-1].label == station.label:
			stops[-1] = stops[-1]._replace(lines=stops[-1].lines + (station.line,))
		else: stops.append(t.public.RouteStop(station.label, (station.line,)))

	return t.public.AnnotatedRoute( path[0], path[-1],
		interchanges, stops, path, route.weight, metric )


class MetroRoutingEngine:

	graph = graph_time = None

	def __init__(self, graph=None, conf=None, timer_func=None):
		'''Creates routing engine for station Graph, built from default dataset if not specified.
			Time-weighted graph is derived from it here, and both are not modified afterwards.'''
		self.conf, self.log = conf or EngineConf(), u.get_logger('mr')
		self.timer_wrapper = timer_func if timer_func else lambda f,*a,**k: f(*a,**k)

		if graph is None: graph = self.timer_wrapper(dataset.build_network)
		self.graph = graph.freeze()
		self.graph_time = self.timer_wrapper(time_graph, self.graph, self.conf)
		self.log.debug(
			'Routing graphs: stations={:,}, edges={:,}'
				' (interchanges={:,}), mean-km={:,.1f}, mean-time={:,.0f}s',
			len(self.graph), self.graph.stat_edge_count(),
			self.graph.stat_interchange_count(),
			self.graph.stat_mean_weight(), self.graph_time.stat_mean_weight() )

	def station(self, name):
		'Return Station for display name, (label, line) tuple or Station object.'
		return self.graph.get(name)

	def list_stations(self):
		return list(station.name for station in self.graph)

	def render_adjacency(self):
		'Return {name: {neighbor_name: distance}} mapping for all stations in the graph.'
		return dict(
			(station.name, dict((nbr.name, km) for nbr, km in self.graph[station].items()))
			for station in self.graph )

	def has_path(self, station_src, station_dst):
		return self.graph.path_exists(station_src, station_dst)

	def _query(self, graph, metric, station_src, station_dst):
		route = shortest_path(graph, station_src, station_dst)
		route = annotate_route(route, metric, collapse=self.conf.collapse_interchanges)
		if route:
			self.log.debug(
				'Route {} -> {} ({}): stations={}, interchanges={}, {}={}',
				route.src.name, route.dst.name, metric,
				len(route.path), route.interchanges, metric, route.weight_format() )
		else: self.log.debug('No route found: {} -> {}', station_src, station_dst)
		return route

	@timer
	def shortest_by_distance(self, station_src, station_dst):
		'Return AnnotatedRoute with minimal total distance (km) between stations.'
		return self._query(self.graph, 'distance', station_src, station_dst)

	@timer
	def shortest_by_time(self, station_src, station_dst):
		'Return AnnotatedRoute with minimal total travel time (seconds) between stations.'
		return self._query(self.graph_time, 'time', station_src, station_dst)
