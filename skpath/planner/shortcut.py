from logging import getLogger
import operator

import numpy as np

from skpath.exceptions import MalformedCostSeriesError


logger = getLogger(__name__)

less_equal = operator.le


class ToleranceCostComparator(object):
    """Accept candidate costs that are not much worse than a reference.

    A candidate is accepted when
    ``candidate <= reference + atol + rtol * abs(reference)``.

    Parameters
    ----------
    atol : float
        absolute tolerance.
    rtol : float
        relative tolerance.
    """

    def __init__(self, atol=0.0, rtol=0.0):
        if atol < 0.0 or rtol < 0.0:
            raise ValueError('tolerances must be non-negative')
        self.atol = atol
        self.rtol = rtol

    def __call__(self, candidate_cost, reference_cost):
        return candidate_cost <= (reference_cost + self.atol
                                  + self.rtol * abs(reference_cost))


def _append_sub_path(result, sub_path):
    # the first point of sub_path replaces the shared endpoint
    if len(result) > 0:
        result.pop()
    result.extend(sub_path)


def _generate(path_generator, start, goal):
    if hasattr(path_generator, 'generate_path'):
        return path_generator.generate_path(start, goal)
    return path_generator(start, goal)


def shortcut_path(path, segment_costs, path_generators,
                  window=1, granularity=1,
                  cost_acceptable=less_equal,
                  return_cost=False):
    """Shortcut a path with the given path generators.

    The search keeps a best candidate from ``path[start_index]`` to
    ``path[best_end]`` and asks every generator for a sub-path from
    ``path[start_index]`` to a further point ``path[end_index]``. While
    some generator beats the best candidate plus the original cost of
    the absorbed points, the window keeps growing by ``granularity``
    points. Once no generator improves the candidate it is committed and
    a new window starts at its end.

    Parameters
    ----------
    path : sequence
        original path. Points may be of any type understood by the
        generators.
    segment_costs : sequence[float]
        cost of each transition of ``path``, ``len(path) - 1`` values.
    path_generators : list
        objects exposing ``generate_path(start, goal)``, or callables
        with the same signature, returning ``(sub_path, cost)`` or
        ``None`` if there is no viable sub-path.
    window : int
        reserved for path generators. It does not change the search.
    granularity : int
        number of original points absorbed each time the window grows.
    cost_acceptable : callable
        ``cost_acceptable(candidate_cost, reference_cost)`` returns
        whether a candidate is acceptable. Defaults to ``<=``.
    return_cost : bool
        If ``True``, return the cost of the shortcut path as well.

    Returns
    -------
    shortcut : list
        shortcut path. If ``return_cost`` is ``True``,
        ``(shortcut, cost)`` is returned.

    Raises
    ------
    skpath.exceptions.MalformedCostSeriesError
        If ``len(segment_costs) != len(path) - 1``.
    """
    n_points = len(path)
    if n_points != len(segment_costs) + 1:
        logger.debug('list length differ : path %d, segment_costs %d',
                     n_points, len(segment_costs))
        raise MalformedCostSeriesError(
            'path of {} points needs {} segment costs, got {}'.format(
                n_points, max(n_points - 1, 0), len(segment_costs)))
    if int(window) != window or window < 0:
        raise ValueError(
            'window must be a non-negative integer, got {}'.format(window))
    if int(granularity) != granularity or granularity < 1:
        raise ValueError(
            'granularity must be a positive integer, got {}'.format(
                granularity))
    granularity = int(granularity)

    if n_points < 2:
        shortcut = list(path)
        if return_cost:
            return shortcut, 0.0
        return shortcut

    accum_costs = np.zeros(n_points)
    accum_costs[1:] = np.cumsum(segment_costs)

    result = []
    total_cost = 0.0

    start_index = 0
    best_end = 1
    best_path = [path[0], path[1]]
    best_cost = accum_costs[1] - accum_costs[0]
    end_index = 2

    while end_index < n_points:
        cost_improved = False
        reference_cost = best_cost \
            + accum_costs[end_index] - accum_costs[best_end]
        for path_generator in path_generators:
            generated = _generate(
                path_generator, path[start_index], path[end_index])
            if generated is None:
                continue
            sub_path, cost = generated
            if len(sub_path) == 0:
                continue
            if cost_acceptable(cost, reference_cost):
                cost_improved = True
                best_path = list(sub_path)
                best_cost = cost
                reference_cost = cost

        if cost_improved:
            best_end = end_index
            if end_index == n_points - 1:
                end_index = n_points
            else:
                end_index = min(end_index + granularity, n_points - 1)
        else:
            logger.debug('commit shortcut [%d, %d] with cost %s',
                         start_index, best_end, best_cost)
            _append_sub_path(result, best_path)
            total_cost += best_cost
            start_index = best_end
            best_end = start_index + 1
            best_path = [path[start_index], path[best_end]]
            best_cost = accum_costs[best_end] - accum_costs[start_index]
            end_index = best_end + 1

    logger.debug('commit shortcut [%d, %d] with cost %s',
                 start_index, best_end, best_cost)
    _append_sub_path(result, best_path)
    total_cost += best_cost
    logger.debug('shortcut %d points into %d points (window=%d)',
                 n_points, len(result), window)

    if return_cost:
        return result, float(total_cost)
    return result
