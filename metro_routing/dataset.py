import itertools as it, operator as op, functools as ft
from collections import OrderedDict

from . import utils as u, types as t
from .types.base import MalformedDatasetError


log = u.get_logger('mr.dataset')


@u.attr_struct
class LineSegment:
	'''Sequence of station labels on a single line,
			with distances (km) between each consecutive pair of these.
		Segment with only one station and no distances is allowed,
			and only declares that station as served by the line (e.g. line terminal
			or a station on a line that is not otherwise part of the dataset).'''
	line = u.attr_init()
	stations = u.attr_init(tuple, converter=tuple)
	distances = u.attr_init(tuple, converter=tuple)

	@classmethod
	def from_seq(cls, line, *seq):
		'Create segment from alternating "station, distance, station, ..." sequence.'
		return cls(line, seq[::2], seq[1::2])


LINES = OrderedDict([
	('B', 'Blue Line'),
	('Y', 'Yellow Line'),
	('O', 'Orange Line (Airport Express)'),
	('P', 'Pink Line'),
	('R', 'Red Line') ])

_seg = LineSegment.from_seq
DELHI_METRO = (
	_seg( 'B', 'Noida Sector 62', 8, 'Botanical Garden', 10, 'Yamuna Bank',
		6, 'Rajiv Chowk', 9, 'Moti Nagar', 7, 'Janak Puri West', 6, 'Dwarka Sector 21' ),
	_seg('B', 'Yamuna Bank', 8, 'Vaishali'),
	_seg('B', 'Moti Nagar', 2, 'Rajouri Garden'),
	_seg( 'Y', 'Huda City Center', 15, 'Saket', 6, 'AIIMS',
		7, 'Rajiv Chowk', 1, 'New Delhi', 2, 'Chandni Chowk', 5, 'Vishwavidyalaya' ),
	_seg('O', 'New Delhi', 2, 'Shivaji Stadium', 7, 'DDS Campus', 8, 'IGI Airport'),
	_seg('O', 'Janak Puri West'),
	_seg('P', 'Rajouri Garden', 2, 'Punjabi Bagh West', 3, 'Netaji Subhash Place'),
	_seg('R', 'Netaji Subhash Place') )
del _seg


def check_segment(seg):
	'Raise MalformedDatasetError if LineSegment is not valid.'
	if not (isinstance(seg.line, str) and seg.line.strip()):
		raise MalformedDatasetError('Missing or invalid line code', seg)
	if not seg.stations:
		raise MalformedDatasetError('Segment without stations', seg)
	if len(seg.distances) != len(seg.stations) - 1:
		raise MalformedDatasetError( 'Segment distances/stations'
			' count mismatch ({} != {} - 1)'.format(len(seg.distances), len(seg.stations)), seg )
	for label in seg.stations:
		if not (isinstance(label, str) and label.strip()):
			raise MalformedDatasetError('Invalid station label', seg, label)
		if t.public.Station.name_sep in label:
			raise MalformedDatasetError('Station label contains name separator', seg, label)
	for dist in seg.distances:
		if isinstance(dist, bool) or not isinstance(dist, (int, float)) or dist < 0:
			raise MalformedDatasetError('Invalid distance value', seg, dist)


def build_network(segments=DELHI_METRO):
	'''Build frozen station Graph from a list of LineSegments.
		Stations are added in the order they are listed in,
			with zero-distance interchange edges added between
			every pair of station records sharing same label afterwards.
		Raises MalformedDatasetError on any inconsistencies in the data.'''
	graph, labels = t.base.Graph(), OrderedDict()

	for seg in segments:
		try: check_segment(seg)
		except MalformedDatasetError as err:
			u.log_lines(log.debug, [
				('Malformed line segment: {}', err.args[0]),
				('  line: {!r}', seg.line),
				('  stations: {}', seg.stations), ('  distances: {}', seg.distances) ])
			raise
		stations = list( graph.add_station(t.public.Station(label.strip(), seg.line.strip()))
			for label in seg.stations )
		for station in stations: labels.setdefault(station.label, dict())[station] = True
		for (a, b), dist in zip(zip(stations, stations[1:]), seg.distances):
			graph.add_edge(a, b, dist)

	for label, stations in labels.items():
		for a, b in it.combinations(stations, 2): graph.add_edge(a, b, 0)

	log.debug(
		'Built network: stations={:,} (labels={:,}), edges={:,}'
			' (interchanges={:,}, mean-distance={:,.1f})',
		len(graph), len(labels), graph.stat_edge_count(),
		graph.stat_interchange_count(), graph.stat_mean_weight() )
	return graph.freeze()
