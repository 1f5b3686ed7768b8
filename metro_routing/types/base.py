### MetroRoutingEngine internal types - base: station registry graph

import itertools as it, operator as op, functools as ft
from collections import namedtuple
import types

from .. import utils as u
from . import public as tp


class UnknownStationError(LookupError): pass
class MalformedDatasetError(Exception): pass


Edge = namedtuple('Edge', 'a b weight')

class Graph:
	'''Undirected weighted graph of Stations - adjacency mapping
			of {station: {neighbor: weight}}, iterated in station insertion order.
		Every edge is stored as a symmetric pair of neighbor entries.
		Expected to be frozen after population, and not mutated afterwards.'''

	_stats_cache_t = namedtuple('StatsCache', 'stations edges ch_edges weight_sum')
	_stats_cache = None

	def __init__(self):
		self.set_idx, self.idx_order, self.idx_name = dict(), dict(), dict()
		self.frozen = False

	def freeze(self):
		self.frozen = True
		return self

	def add_station(self, station):
		'Add station with no neighbors, if missing. Returns stored station object.'
		if isinstance(station, str): station = tp.Station.parse(station)
		if station in self.set_idx: return self.idx_name[station.name]
		assert not self.frozen, 'Adding station to frozen graph'
		self.set_idx[station] = dict()
		self.idx_order[station] = len(self.idx_order)
		self.idx_name[station.name] = station
		self._stats_cache = None
		return station

	def add_edge(self, station_a, station_b, weight):
		'''Add (or update weight of) undirected edge between two known stations.
			Raises UnknownStationError if either one is missing.'''
		assert not self.frozen, 'Adding edge to frozen graph'
		a, b = self.get(station_a), self.get(station_b)
		if a == b: raise MalformedDatasetError('Self-edge for station', a)
		if not (isinstance(weight, (int, float)) and weight >= 0):
			raise MalformedDatasetError('Invalid edge weight', a, b, weight)
		self.set_idx[a][b] = self.set_idx[b][a] = weight
		self._stats_cache = None

	def get(self, station):
		'''Return stored Station for display name,
			(label, line) tuple or Station, raising UnknownStationError if missing.'''
		if isinstance(station, tuple): station = tp.Station(*station)
		name = station.name if isinstance(station, tp.Station) else station
		try: return self.idx_name[name]
		except (KeyError, TypeError): raise UnknownStationError(station) from None

	def neighbors(self, station):
		'Read-only {neighbor: weight} mapping for station.'
		return types.MappingProxyType(self.set_idx[self.get(station)])

	def index(self, station): return self.idx_order[station]

	def edges(self):
		'Iterate over each undirected edge once, in deterministic order.'
		for a, nbrs in self.set_idx.items():
			for b, weight in nbrs.items():
				if self.idx_order[a] < self.idx_order[b]: yield Edge(a, b, weight)

	def path_exists(self, station_src, station_dst):
		'Breadth-first reachability check between two stations.'
		src, dst = self.get(station_src), self.get(station_dst)
		queue, seen = [src], {src}
		while queue:
			queue_prev, queue = queue, list()
			for station in queue_prev:
				if station == dst: return True # found path
				for nbr in self.set_idx[station]:
					if nbr in seen: continue
					seen.add(nbr)
					queue.append(nbr)
		return False

	def map_weights(self, weight_func):
		'''Return new frozen Graph with same stations (in same order) and edges,
			but with weights replaced by weight_func(a, b, weight) values.'''
		graph = Graph()
		for station in self: graph.add_station(station)
		for a, b, weight in self.edges(): graph.add_edge(a, b, weight_func(a, b, weight))
		return graph.freeze()

	def _stats(self):
		if not self._stats_cache:
			edges = ch_edges = weight_sum = 0
			for a, b, weight in self.edges():
				edges += 1
				weight_sum += weight
				if a.is_interchange_with(b): ch_edges += 1
			self._stats_cache = self._stats_cache_t(
				len(self.set_idx), edges, ch_edges, weight_sum )
		return self._stats_cache

	def stat_edge_count(self): return self._stats().edges
	def stat_interchange_count(self): return self._stats().ch_edges
	def stat_mean_weight(self):
		s = self._stats()
		return (s.weight_sum / s.edges) if s.edges else 0

	def __contains__(self, station):
		try: self.get(station)
		except UnknownStationError: return False
		return True

	def __getitem__(self, station): return self.neighbors(station)
	def __len__(self): return len(self.set_idx)
	def __iter__(self): return iter(self.set_idx)
	def __repr__(self):
		return '<Graph stations={} edges={}>'.format(len(self), self.stat_edge_count())
