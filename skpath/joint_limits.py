"""Joint limit utilities.

Functions:
- check_joint_limits: validate a pair of min / max limit vectors
- normalize_angles_into_range: wrap a joint vector into its limits
- are_joints_within_limits: containment check without modification
"""

from logging import getLogger

import numpy as np

from skpath.exceptions import DimensionMismatchError
from skpath.exceptions import InvalidLimitsError
from skpath.exceptions import UnnormalizableValueError
from skpath.math import FULL_TURN
from skpath.math import normalize_angle


logger = getLogger(__name__)


def _as_vector(values):
    return np.array(values, dtype=np.float64).reshape(-1)


def check_joint_limits(min_angles, max_angles):
    """Validate joint limits.

    Parameters
    ----------
    min_angles : list[float] or numpy.ndarray
        minimum angle of each joint.
    max_angles : list[float] or numpy.ndarray
        maximum angle of each joint.

    Returns
    -------
    min_angles, max_angles : tuple[numpy.ndarray, numpy.ndarray]
        limits converted to float arrays.
    """
    min_angles = _as_vector(min_angles)
    max_angles = _as_vector(max_angles)
    if len(min_angles) != len(max_angles):
        logger.debug('limit length differ : min %d, max %d',
                     len(min_angles), len(max_angles))
        raise DimensionMismatchError(
            'length of min_angles ({}) and max_angles ({}) differ'.format(
                len(min_angles), len(max_angles)))
    invalid = np.where(min_angles > max_angles)[0]
    if len(invalid) > 0:
        i = invalid[0]
        logger.debug('invalid limits for joint %d : [%s, %s]',
                     i, min_angles[i], max_angles[i])
        raise InvalidLimitsError(
            'min angle {} of joint {} is greater than max angle {}'.format(
                min_angles[i], i, max_angles[i]))
    return min_angles, max_angles


def normalize_angles_into_range(angles, min_angles, max_angles):
    """Normalize joint angles into their limits.

    Each angle is wrapped into the full turn starting at its minimum
    limit, then checked against the maximum limit.

    Parameters
    ----------
    angles : list[float] or numpy.ndarray
        joint angles to be normalized. This is not modified.
    min_angles : list[float] or numpy.ndarray
        minimum angle of each joint.
    max_angles : list[float] or numpy.ndarray
        maximum angle of each joint.

    Returns
    -------
    normalized : numpy.ndarray
        normalized joint angles.

    Raises
    ------
    skpath.exceptions.DimensionMismatchError
        If the lengths of the vectors differ.
    skpath.exceptions.InvalidLimitsError
        If a minimum limit is greater than its maximum.
    skpath.exceptions.UnnormalizableValueError
        If a wrapped angle still lies outside its limits.

    Examples
    --------
    >>> import numpy as np
    >>> from skpath.joint_limits import normalize_angles_into_range
    >>> normalize_angles_into_range(
    ...     [3 * np.pi / 2, 0.5], [-np.pi, -1.0], [np.pi, 1.0])
    array([-1.57079633,  0.5       ])
    """
    angles = _as_vector(angles)
    if len(angles) != len(min_angles) or len(angles) != len(max_angles):
        raise DimensionMismatchError(
            'length of angles ({}) must match the limits ({}, {})'.format(
                len(angles), len(min_angles), len(max_angles)))
    min_angles, max_angles = check_joint_limits(min_angles, max_angles)

    normalized = np.empty_like(angles)
    for i, (angle, min_angle, max_angle) in enumerate(
            zip(angles, min_angles, max_angles)):
        value = normalize_angle(angle, min_angle, min_angle + FULL_TURN)
        if value < min_angle or value > max_angle:
            logger.debug('joint %d angle %s cannot be placed in [%s, %s]',
                         i, angle, min_angle, max_angle)
            raise UnnormalizableValueError(
                'angle {} of joint {} cannot be normalized into '
                '[{}, {}]'.format(angle, i, min_angle, max_angle))
        normalized[i] = value
    return normalized


def are_joints_within_limits(angles, min_angles, max_angles):
    """Return whether all joints are within their [min, max] limits."""
    angles = _as_vector(angles)
    min_angles = _as_vector(min_angles)
    max_angles = _as_vector(max_angles)
    if len(angles) != len(min_angles) or len(angles) != len(max_angles):
        raise DimensionMismatchError(
            'length of angles ({}) must match the limits ({}, {})'.format(
                len(angles), len(min_angles), len(max_angles)))
    return bool(np.all((min_angles <= angles) & (angles <= max_angles)))
