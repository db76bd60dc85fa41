from logging import getLogger

import numpy as np

from skpath.exceptions import DimensionMismatchError
from skpath.exceptions import UnnormalizableValueError
from skpath.joint_limits import check_joint_limits
from skpath.joint_limits import normalize_angles_into_range
from skpath.math import _LIMIT_WIDTH_TOLERANCE
from skpath.math import crosses_limits
from skpath.math import FULL_TURN
from skpath.math import shortest_angle_diff
from skpath.math import sign


logger = getLogger(__name__)

DEFAULT_EPS = 1e-6


class JointPathInterpolator(object):
    """Interpolate joint-space paths at a fixed per-joint resolution.

    Parameters
    ----------
    min_angles : list[float] or numpy.ndarray
        minimum angle of each joint.
    max_angles : list[float] or numpy.ndarray
        maximum angle of each joint.
    increments : list[float] or numpy.ndarray
        maximum change of each joint between two waypoints.
    continuous_joints : list[bool] or numpy.ndarray or None
        ``True`` for joints which wrap around without hard limits.
        Their limits must span a full turn. If ``None``, every joint
        is bounded.
    eps : float
        tolerance used to decide that a joint reached its target.

    Examples
    --------
    >>> import numpy as np
    >>> from skpath.interpolator import JointPathInterpolator
    >>> ip = JointPathInterpolator([-np.pi], [np.pi], [0.5])
    >>> ip.interpolate([0.0], [np.pi]).shape
    (8, 1)
    """

    def __init__(self, min_angles, max_angles, increments,
                 continuous_joints=None, eps=DEFAULT_EPS):
        increments = np.array(increments, dtype=np.float64).reshape(-1)
        if continuous_joints is None:
            continuous_joints = np.zeros(len(increments), dtype=bool)
        continuous_joints = np.array(
            continuous_joints, dtype=bool).reshape(-1)

        sizes = [len(min_angles), len(max_angles), len(increments),
                 len(continuous_joints)]
        if len(set(sizes)) != 1:
            logger.debug('list length differ : min %d, max %d, '
                         'increments %d, continuous_joints %d', *sizes)
            raise DimensionMismatchError(
                'min_angles, max_angles, increments and continuous_joints '
                'must have the same length, got {}'.format(sizes))
        self.min_angles, self.max_angles = check_joint_limits(
            min_angles, max_angles)
        widths = self.max_angles - self.min_angles
        invalid = np.where(continuous_joints & (
            np.abs(widths - FULL_TURN) > _LIMIT_WIDTH_TOLERANCE))[0]
        if len(invalid) > 0:
            i = invalid[0]
            raise UnnormalizableValueError(
                'limits [{}, {}] of continuous joint {} do not span '
                'a full turn'.format(
                    self.min_angles[i], self.max_angles[i], i))
        if np.any(increments <= 0.0):
            raise ValueError(
                'increments must be positive, got {}'.format(increments))
        self.increments = increments
        self.continuous_joints = continuous_joints
        self.eps = eps

    @property
    def dim(self):
        return len(self.increments)

    def normalize(self, angles):
        """Return ``angles`` normalized into the joint limits."""
        angles = np.array(angles, dtype=np.float64).reshape(-1)
        if len(angles) != self.dim:
            logger.debug('joint vector length %d, expected %d',
                         len(angles), self.dim)
            raise DimensionMismatchError(
                'expected {} joint angles, got {}'.format(
                    self.dim, len(angles)))
        return normalize_angles_into_range(
            angles, self.min_angles, self.max_angles)

    def _travel_directions(self, start, end):
        directions = np.zeros(self.dim, dtype=np.int64)
        for i in range(self.dim):
            diff = shortest_angle_diff(end[i], start[i])
            if not self.continuous_joints[i] and crosses_limits(
                    start[i], diff, self.min_angles[i], self.max_angles[i]):
                # take the long way around to stay inside the limits
                directions[i] = -sign(diff)
            else:
                directions[i] = sign(diff)
        return directions

    def _travel_distances(self, start, end):
        distances = np.zeros(self.dim)
        for i in range(self.dim):
            diff = shortest_angle_diff(end[i], start[i])
            if not self.continuous_joints[i] and crosses_limits(
                    start[i], diff, self.min_angles[i], self.max_angles[i]):
                distances[i] = FULL_TURN - abs(diff)
            else:
                distances[i] = abs(diff)
        return distances

    def _n_steps(self, start, end, distances):
        n_steps = 0
        for i in range(self.dim):
            gap = abs(end[i] - start[i])
            if gap < self.eps or distances[i] < self.eps \
               or gap <= self.increments[i]:
                n = 1
            else:
                n = int(np.ceil(
                    (distances[i] - self.eps) / self.increments[i]))
            n_steps = max(n_steps, n)
        return n_steps

    def travel_directions(self, start, end):
        """Return the direction (-1, 0 or 1) in which each joint moves."""
        return self._travel_directions(
            self.normalize(start), self.normalize(end))

    def travel_distances(self, start, end):
        """Return the angular distance each joint travels.

        For bounded joints this is the major arc when the minor arc
        would cross a joint limit.
        """
        return self._travel_distances(
            self.normalize(start), self.normalize(end))

    def n_steps(self, start, end):
        """Return the number of steps of the path from start to end."""
        start = self.normalize(start)
        end = self.normalize(end)
        return self._n_steps(start, end, self._travel_distances(start, end))

    def _step(self, current, target, directions):
        for i in range(self.dim):
            # remaining distance along the direction of travel
            remaining = np.mod(directions[i] * (target[i] - current[i]),
                               FULL_TURN)
            if remaining > FULL_TURN - self.eps:
                remaining = 0.0
            if remaining <= self.increments[i] + self.eps:
                current[i] = target[i]
            else:
                current[i] += directions[i] * self.increments[i]

            if current[i] > self.max_angles[i]:
                current[i] -= FULL_TURN
            if current[i] < self.min_angles[i]:
                current[i] += FULL_TURN
        return current

    def interpolate(self, start, end):
        """Interpolate a path from start to end.

        Parameters
        ----------
        start : list[float] or numpy.ndarray
            start joint angles.
        end : list[float] or numpy.ndarray
            goal joint angles.

        Returns
        -------
        path : numpy.ndarray
            array of shape (n_steps + 1, dim). The first row is the
            normalized start and the last row the normalized end.
        """
        start = self.normalize(start)
        end = self.normalize(end)

        directions = self._travel_directions(start, end)
        distances = self._travel_distances(start, end)
        n_steps = self._n_steps(start, end, distances)
        logger.debug('interpolating %d joints in %d steps',
                     self.dim, n_steps)

        path = np.empty((n_steps + 1, self.dim))
        path[0] = start
        current = start.copy()
        for c in range(n_steps):
            current = self._step(current, end, directions)
            path[c + 1] = current
        return path


def interpolate_path(start, end, min_angles, max_angles, increments,
                     continuous_joints=None, eps=DEFAULT_EPS):
    """Interpolate a joint-space path between two configurations.

    Every joint moves in lockstep by at most its increment per step.
    Continuous joints follow the shortest arc. Bounded joints follow
    the shortest arc unless it crosses a limit, in which case they go
    the other way around.

    Parameters
    ----------
    start : list[float] or numpy.ndarray
        start joint angles.
    end : list[float] or numpy.ndarray
        goal joint angles.
    min_angles : list[float] or numpy.ndarray
        minimum angle of each joint.
    max_angles : list[float] or numpy.ndarray
        maximum angle of each joint.
    increments : list[float] or numpy.ndarray
        maximum change of each joint between two waypoints.
    continuous_joints : list[bool] or None
        ``True`` for joints which wrap around. Defaults to all ``False``.
    eps : float
        tolerance used to decide that a joint reached its target.

    Returns
    -------
    path : numpy.ndarray
        interpolated path of shape (n_steps + 1, dim).

    Raises
    ------
    skpath.exceptions.DimensionMismatchError
        If the input vectors do not share the same length.
    skpath.exceptions.InvalidLimitsError
        If a minimum limit is greater than its maximum.
    skpath.exceptions.UnnormalizableValueError
        If start or end cannot be normalized into the limits.
    """
    if continuous_joints is None:
        continuous_joints = [False] * len(start)
    interpolator = JointPathInterpolator(
        min_angles, max_angles, increments,
        continuous_joints=continuous_joints, eps=eps)
    return interpolator.interpolate(start, end)
