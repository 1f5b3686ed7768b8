#!/usr/bin/env python3

import itertools as it, operator as op, functools as ft
from pathlib import Path
import os, sys

import metro_routing as mr


invalid_input_msg = 'Invalid input or no path found.'


def main(args=None):
	conf_engine = mr.engine.EngineConf()

	import argparse
	parser = argparse.ArgumentParser(
		description='Shortest distance/time routes between metro network stations.')

	group = parser.add_argument_group('Misc/debug options')
	group.add_argument('--dot-for-network', metavar='path',
		help='Dump station graph (in graphviz dot format) to a specified file and exit.')
	group.add_argument('--dot-opts', metavar='yaml-data',
		help='Options for graphviz graph/nodes/edges to use with'
			' --dot-for-network command, as a YAML mapping. Example: {graph: {rankdir: LR}}')
	group.add_argument('--engine-conf', metavar='yaml-data',
		help='Override values for EngineConf as a YAML mapping.'
			' Example: {delta_ch: 180, collapse_interchanges: false}')
	group.add_argument('--debug', action='store_true', help='Verbose operation mode.')

	cmds = parser.add_subparsers(title='Commands', dest='call')

	cmd = cmds.add_parser('stations', help='List all known stations (with line codes).')
	cmd = cmds.add_parser('map', help='Print station adjacency map with distances.')

	station_help = 'Station name, with line code after "~". Example: "Rajiv Chowk~B"'
	for call, call_help in [
			('has-path', 'Check if there is any path between two stations.'),
			('query-distance', 'Find route with minimal distance between two stations.'),
			('query-time', 'Find route with minimal travel time between two stations.') ]:
		cmd = cmds.add_parser(call, help=call_help)
		cmd.add_argument('station_from', help=station_help)
		cmd.add_argument('station_to', help=station_help)

	opts = parser.parse_args(sys.argv[1:] if args is None else args)

	mr.u.logging.basicConfig(
		format='%(asctime)s :: %(name)s %(levelname)s :: %(message)s',
		datefmt='%Y-%m-%d %H:%M:%S',
		level=mr.u.logging.DEBUG if opts.debug else mr.u.logging.WARNING )

	if opts.engine_conf:
		import yaml
		for k, v in (yaml.safe_load(opts.engine_conf) or dict()).items():
			if not hasattr(conf_engine, k):
				parser.error('Unrecognized engine conf option: {!r} (value: {!r})'.format(k, v))
			setattr(conf_engine, k, v)
		try: conf_engine.check()
		except ValueError as err: parser.error('Invalid engine conf: {}'.format(err))

	graph, router = mr.init_router(conf=conf_engine, timer_func=mr.calc_timer)

	if opts.dot_for_network:
		dot_opts = dict()
		if opts.dot_opts:
			import yaml
			dot_opts = yaml.safe_load(opts.dot_opts)
		with mr.u.safe_replacement(opts.dot_for_network) as dst:
			mr.vis.dot_for_network(graph, dst, dot_opts=dot_opts)
		return

	if opts.call == 'stations': mr.vis.print_lines(
		mr.vis.station_list_lines(graph, line_names=mr.dataset.LINES) )

	elif opts.call == 'map': mr.vis.print_lines(mr.vis.adjacency_lines(graph))

	elif opts.call in ['has-path', 'query-distance', 'query-time']:
		try: a, b = router.station(opts.station_from), router.station(opts.station_to)
		except mr.UnknownStationError as err:
			parser.error('Unknown station: {!r}'.format(err.args[0]))
		if not router.has_path(a, b):
			mr.u.p(invalid_input_msg if opts.call != 'has-path' else 'no')
			return 1
		if opts.call == 'has-path': mr.u.p('yes')
		elif opts.call == 'query-distance': router.shortest_by_distance(a, b).pretty_print()
		elif opts.call == 'query-time': router.shortest_by_time(a, b).pretty_print()

	elif not opts.call: parser.error('No command specified')
	else: parser.error('Action not implemented: {}'.format(opts.call))

if __name__ == '__main__': sys.exit(main())
