import unittest

import numpy as np
from numpy import testing

from skpath.exceptions import MalformedCostSeriesError
from skpath.exceptions import PathError
from skpath.planner import compute_segment_costs
from skpath.planner import LinearPathGenerator
from skpath.planner import path_cost
from skpath.planner import shortcut_path
from skpath.planner import ToleranceCostComparator


class CountingPathGenerator(object):

    def __init__(self, path_generator):
        self.path_generator = path_generator
        self.n_calls = 0

    def generate_path(self, start, goal):
        self.n_calls += 1
        return self.path_generator.generate_path(start, goal)


def make_path(points):
    return [np.array(p, dtype=np.float64) for p in points]


class TestShortcutPath(unittest.TestCase):

    def assert_path_equal(self, path, expected):
        self.assertEqual(len(path), len(expected))
        for p, q in zip(path, expected):
            testing.assert_almost_equal(p, q)

    def test_two_point_path_is_unchanged(self):
        path = make_path([[0, 0], [1, 0]])
        result = shortcut_path(path, [1.0], [LinearPathGenerator()])
        self.assert_path_equal(result, path)

    def test_single_point_path(self):
        path = make_path([[0, 0]])
        result, cost = shortcut_path(
            path, [], [LinearPathGenerator()], return_cost=True)
        self.assert_path_equal(result, path)
        self.assertEqual(cost, 0.0)

    def test_no_generators(self):
        path = make_path([[0, 0], [1, 1], [2, 0], [3, 1], [4, 0]])
        costs = compute_segment_costs(path)
        result, cost = shortcut_path(path, costs, [], return_cost=True)
        self.assert_path_equal(result, path)
        testing.assert_almost_equal(cost, sum(costs))

    def test_generator_without_proposal(self):
        path = make_path([[0, 0], [1, 1], [2, 0]])
        costs = compute_segment_costs(path)
        result = shortcut_path(path, costs, [lambda start, goal: None])
        self.assert_path_equal(result, path)

    def test_straight_path(self):
        path = make_path([[i, 0] for i in range(5)])
        costs = compute_segment_costs(path)
        result, cost = shortcut_path(
            path, costs, [LinearPathGenerator()], return_cost=True)
        self.assert_path_equal(result, [path[0], path[-1]])
        testing.assert_almost_equal(cost, 4.0)

    def test_zigzag_path(self):
        path = make_path([[0, 0], [1, 1], [2, 0], [3, 1], [4, 0]])
        costs = compute_segment_costs(path)
        result, cost = shortcut_path(
            path, costs, [LinearPathGenerator()], return_cost=True)
        self.assert_path_equal(result, [path[0], path[-1]])
        testing.assert_almost_equal(cost, 4.0)
        self.assertLess(cost, sum(costs))

    def test_shortcut_around_obstacle(self):
        def pred_valid_config(p):
            return not (1.5 < p[0] < 2.5 and p[1] < 0.9)

        path = make_path([[0, 0], [1, 1], [2, 1], [3, 1], [4, 0]])
        costs = compute_segment_costs(path)
        generator = LinearPathGenerator(
            pred_valid_config=pred_valid_config, resolution=0.05)
        result, cost = shortcut_path(
            path, costs, [generator], return_cost=True)
        self.assert_path_equal(result, [path[0], path[1], path[3], path[4]])
        testing.assert_almost_equal(cost, 2 * np.sqrt(2) + 2)
        testing.assert_almost_equal(cost, path_cost(result))

    def test_cost_never_exceeds_original(self):
        random_state = np.random.RandomState(0)
        path = make_path(random_state.uniform(-1.0, 1.0, (30, 2)))
        costs = compute_segment_costs(path)
        for granularity in [1, 2, 5]:
            result, cost = shortcut_path(
                path, costs, [LinearPathGenerator()],
                granularity=granularity, return_cost=True)
            self.assertLessEqual(cost, sum(costs) + 1e-9)
            testing.assert_almost_equal(cost, path_cost(result))
            testing.assert_equal(result[0], path[0])
            testing.assert_equal(result[-1], path[-1])

    def test_granularity(self):
        path = make_path([[i, 0] for i in range(10)])
        costs = compute_segment_costs(path)

        generator = CountingPathGenerator(LinearPathGenerator())
        result = shortcut_path(path, costs, [generator], granularity=1)
        self.assert_path_equal(result, [path[0], path[-1]])
        self.assertEqual(generator.n_calls, 8)

        generator = CountingPathGenerator(LinearPathGenerator())
        result = shortcut_path(path, costs, [generator], granularity=3)
        self.assert_path_equal(result, [path[0], path[-1]])
        self.assertEqual(generator.n_calls, 4)

        generator = CountingPathGenerator(LinearPathGenerator())
        result = shortcut_path(path, costs, [generator], granularity=100)
        self.assert_path_equal(result, [path[0], path[-1]])
        self.assertEqual(generator.n_calls, 2)

    def test_generic_points_and_best_generator(self):
        path = ['A', 'B', 'C']
        costs = [1.0, 1.0]

        def detour(start, goal):
            return [start, 'X', goal], 1.5

        def direct(start, goal):
            return [start, goal], 1.0

        for generators in [[detour, direct], [direct, detour]]:
            result, cost = shortcut_path(
                path, costs, generators, return_cost=True)
            self.assertEqual(result, ['A', 'C'])
            self.assertEqual(cost, 1.0)

        result, cost = shortcut_path(path, costs, [detour], return_cost=True)
        self.assertEqual(result, ['A', 'X', 'C'])
        self.assertEqual(cost, 1.5)

    def test_cost_acceptable(self):
        path = ['A', 'B', 'C']
        costs = [1.0, 1.0]

        def expensive(start, goal):
            return [start, goal], 2.2

        result = shortcut_path(path, costs, [expensive])
        self.assertEqual(result, path)
        result = shortcut_path(
            path, costs, [expensive],
            cost_acceptable=ToleranceCostComparator(atol=0.5))
        self.assertEqual(result, ['A', 'C'])
        result = shortcut_path(
            path, costs, [expensive],
            cost_acceptable=lambda candidate, reference: False)
        self.assertEqual(result, path)

    def test_malformed_cost_series(self):
        path = make_path([[0, 0], [1, 0], [2, 0]])
        costs = [1.0]
        with self.assertRaises(MalformedCostSeriesError):
            shortcut_path(path, costs, [LinearPathGenerator()])
        with self.assertRaises(MalformedCostSeriesError):
            shortcut_path(path, [1.0, 1.0, 1.0], [LinearPathGenerator()])
        with self.assertRaises(PathError):
            shortcut_path(path[:1], [1.0], [])
        self.assertEqual(len(path), 3)
        self.assertEqual(costs, [1.0])
        self.assertEqual(MalformedCostSeriesError.kind,
                         'malformed_cost_series')

    def test_invalid_parameters(self):
        path = make_path([[0, 0], [1, 0], [2, 0]])
        costs = compute_segment_costs(path)
        with self.assertRaises(ValueError):
            shortcut_path(path, costs, [], granularity=0)
        with self.assertRaises(ValueError):
            shortcut_path(path, costs, [], window=-1)
        # window does not change the result
        testing.assert_equal(
            shortcut_path(path, costs, [LinearPathGenerator()], window=5),
            shortcut_path(path, costs, [LinearPathGenerator()], window=0))


class TestToleranceCostComparator(unittest.TestCase):

    def test_tolerance(self):
        comparator = ToleranceCostComparator(atol=0.5)
        self.assertTrue(comparator(1.4, 1.0))
        self.assertFalse(comparator(1.6, 1.0))

        comparator = ToleranceCostComparator(rtol=0.1)
        self.assertTrue(comparator(1.05, 1.0))
        self.assertFalse(comparator(1.2, 1.0))

        comparator = ToleranceCostComparator()
        self.assertTrue(comparator(1.0, 1.0))
        self.assertFalse(comparator(1.0 + 1e-9, 1.0))

        with self.assertRaises(ValueError):
            ToleranceCostComparator(atol=-1.0)
