from logging import getLogger

import numpy as np

from skpath.exceptions import PathError
from skpath.interpolator import DEFAULT_EPS
from skpath.interpolator import JointPathInterpolator
from skpath.planner.utils import euclidean_distance
from skpath.planner.utils import joint_space_distance
from skpath.planner.utils import path_cost


logger = getLogger(__name__)


class PathGenerator(object):
    """Base class of the local planners used by shortcut_path.

    Subclasses implement ``generate_path(start, goal)`` which returns
    ``(sub_path, cost)`` or ``None`` if there is no viable sub-path
    between the two points. It may be called many times on overlapping
    windows, so it must not modify shared state.
    """

    def generate_path(self, start, goal):
        raise NotImplementedError

    def __call__(self, start, goal):
        return self.generate_path(start, goal)


class LinearPathGenerator(PathGenerator):
    """Connect two points with a straight segment.

    Parameters
    ----------
    distance_fn : callable or None
        ``distance_fn(a, b)`` returns the cost of the segment.
        Euclidean distance is used if ``None``.
    pred_valid_config : callable or None
        predicate on a point. If given, the segment is sampled every
        ``resolution`` and rejected if any sample is invalid.
    resolution : float or None
        sampling interval of the validity check. Required when
        ``pred_valid_config`` is given.
    """

    def __init__(self, distance_fn=None, pred_valid_config=None,
                 resolution=None):
        if pred_valid_config is not None and resolution is None:
            raise ValueError(
                'resolution is required to check the validity of segments')
        if resolution is not None and resolution <= 0.0:
            raise ValueError(
                'resolution must be positive, got {}'.format(resolution))
        if distance_fn is None:
            distance_fn = euclidean_distance
        self.distance_fn = distance_fn
        self.pred_valid_config = pred_valid_config
        self.resolution = resolution

    def _is_valid_segment(self, start, goal):
        start = np.asarray(start, dtype=np.float64)
        goal = np.asarray(goal, dtype=np.float64)
        length = np.linalg.norm(goal - start)
        n_samples = max(int(np.ceil(length / self.resolution)), 1)
        for t in np.linspace(0.0, 1.0, n_samples + 1):
            if not self.pred_valid_config(start + (goal - start) * t):
                return False
        return True

    def generate_path(self, start, goal):
        if self.pred_valid_config is not None \
           and not self._is_valid_segment(start, goal):
            return None
        return [start, goal], self.distance_fn(start, goal)


class JointInterpolationPathGenerator(PathGenerator):
    """Connect two configurations with an interpolated joint-space path.

    Parameters
    ----------
    min_angles : list[float] or numpy.ndarray
        minimum angle of each joint.
    max_angles : list[float] or numpy.ndarray
        maximum angle of each joint.
    increments : list[float] or numpy.ndarray
        maximum change of each joint between two waypoints.
    continuous_joints : list[bool] or None
        ``True`` for joints which wrap around.
    eps : float
        tolerance passed to the interpolator.
    cost_fn : callable or None
        ``cost_fn(path)`` returns the cost of an interpolated path.
        Defaults to its joint-space length.
    pred_valid_config : callable or None
        predicate on a configuration. Paths with an invalid waypoint
        are rejected.
    """

    def __init__(self, min_angles, max_angles, increments,
                 continuous_joints=None, eps=DEFAULT_EPS,
                 cost_fn=None, pred_valid_config=None):
        self.interpolator = JointPathInterpolator(
            min_angles, max_angles, increments,
            continuous_joints=continuous_joints, eps=eps)
        if cost_fn is None:
            continuous = self.interpolator.continuous_joints

            def cost_fn(path):
                return path_cost(
                    path,
                    lambda a, b: joint_space_distance(a, b, continuous))
        self.cost_fn = cost_fn
        self.pred_valid_config = pred_valid_config

    def generate_path(self, start, goal):
        try:
            path = self.interpolator.interpolate(start, goal)
        except PathError as e:
            logger.debug('failed to interpolate between %s and %s: %s',
                         start, goal, e)
            return None
        if self.pred_valid_config is not None:
            for av in path:
                if not self.pred_valid_config(av):
                    return None
        return list(path), self.cost_fn(path)
