import itertools as it, operator as op, functools as ft
import time

from . import engine, dataset, vis, utils as u, types as t
from .types.base import UnknownStationError, MalformedDatasetError


def calc_timer(func, *args, log=u.get_logger('mr.timer'), timer_name=None, **kws):
	if not timer_name:
		func_base = func if not isinstance(func, ft.partial) else func.func
		timer_name = '.'.join([func_base.__module__.strip('_'), func_base.__qualname__])
	log.debug('[{}] Starting...', timer_name)
	td = time.monotonic()
	data = func(*args, **kws)
	td = time.monotonic() - td
	log.debug('[{}] Finished in: {:.4f}s', timer_name, td)
	return data


def init_router(segments=None, conf=None, timer_func=None, log=u.get_logger('mr.init')):
	'''Build station graph from segments (default Delhi Metro dataset)
		and return (graph, router) tuple with MetroRoutingEngine for it.'''
	build_func = dataset.build_network
	if timer_func: build_func = ft.partial(timer_func, build_func)
	graph = build_func() if segments is None else build_func(segments)
	log.debug('Parsed network: stations={:,}, edges={:,}', len(graph), graph.stat_edge_count())
	router = engine.MetroRoutingEngine(graph, conf=conf, timer_func=timer_func)
	return graph, router
