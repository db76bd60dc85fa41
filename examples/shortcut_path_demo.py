#!/usr/bin/env python

import argparse

import numpy as np

import skpath
from skpath.planner import compute_segment_costs
from skpath.planner import JointInterpolationPathGenerator
from skpath.planner import joint_space_distance
from skpath.planner import shortcut_path
from skpath.planner import ToleranceCostComparator


def main():
    parser = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description='Interpolate a joint-space path and shortcut it'
    )
    parser.add_argument(
        '--no-interactive',
        action='store_true',
        help="Run in non-interactive mode (do not wait for user input)"
    )
    parser.add_argument(
        '--increment',
        type=float,
        default=np.deg2rad(5.0),
        help='Maximum joint change between waypoints [rad]'
    )
    parser.add_argument(
        '--granularity',
        type=int,
        default=3,
        help='Number of points absorbed each time the window grows'
    )
    args = parser.parse_args()

    min_angles = [-np.pi, -np.pi, -2.0]
    max_angles = [np.pi, np.pi, 2.0]
    increments = [args.increment] * 3

    # the first joint is bounded and has to go the long way around
    start = [3.0, 0.0, -1.5]
    via = [-2.0, 1.0, 1.5]
    goal = [-3.0, -1.0, 0.0]
    first = skpath.interpolator.interpolate_path(
        start, via, min_angles, max_angles, increments)
    second = skpath.interpolator.interpolate_path(
        via, goal, min_angles, max_angles, increments)
    path = list(first) + list(second[1:])
    costs = compute_segment_costs(path, joint_space_distance)
    print('original path: {} waypoints, cost {:.3f}'.format(
        len(path), sum(costs)))

    # a local planner which treats the first joint as continuous
    generator = JointInterpolationPathGenerator(
        min_angles, max_angles, increments,
        continuous_joints=[True, False, False])
    shortcut, cost = shortcut_path(
        path, costs, [generator],
        granularity=args.granularity,
        cost_acceptable=ToleranceCostComparator(atol=1e-9),
        return_cost=True)
    print('shortcut path: {} waypoints, cost {:.3f}'.format(
        len(shortcut), cost))
    print('start {} -> goal {}'.format(
        np.round(shortcut[0], 3), np.round(shortcut[-1], 3)))

    if not args.no_interactive:
        input('Press Enter to exit.')


if __name__ == '__main__':
    main()
