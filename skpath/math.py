from __future__ import absolute_import

from math import pi

import numpy as np

from skpath.exceptions import UnnormalizableValueError


FULL_TURN = 2.0 * pi
# tolerance used when checking that a range spans exactly one full turn
_LIMIT_WIDTH_TOLERANCE = 1e-9


def normalize_angle(angle, min_angle=-pi, max_angle=pi):
    """Normalize an angle into the range [min_angle, max_angle].

    An angle already inside the closed range is returned as is, so that
    both ``-pi`` and ``pi`` survive normalization into [-pi, pi]. Other
    angles are shifted by multiples of 2 * pi into [min_angle, max_angle).

    Parameters
    ----------
    angle : float
        angle in radian.
    min_angle : float
        lower bound of the range.
    max_angle : float
        upper bound of the range. ``max_angle - min_angle`` must be
        a full turn.

    Returns
    -------
    angle : float
        normalized angle.

    Raises
    ------
    skpath.exceptions.UnnormalizableValueError
        If the range does not span a full turn.

    Examples
    --------
    >>> from skpath.math import normalize_angle
    >>> normalize_angle(3 * np.pi / 2)
    -1.5707963267948966
    >>> normalize_angle(-np.pi / 2, 0.0, 2 * np.pi)
    4.71238898038469
    """
    if abs((max_angle - min_angle) - FULL_TURN) > _LIMIT_WIDTH_TOLERANCE:
        raise UnnormalizableValueError(
            'range [{}, {}] does not span a full turn'.format(
                min_angle, max_angle))
    angle = float(angle)
    if min_angle <= angle <= max_angle:
        return angle
    angle = min_angle + np.mod(angle - min_angle, FULL_TURN)
    # np.mod may round up to exactly a full turn
    if angle >= max_angle:
        angle -= FULL_TURN
    return float(angle)


def shortest_angle_diff(a1, a2):
    """Return the shortest signed difference between two angles.

    The result is positive if following the shortest arc from ``a2``
    to ``a1`` is a counter-clockwise rotation.

    Parameters
    ----------
    a1 : float
        target angle in radian.
    a2 : float
        source angle in radian.

    Returns
    -------
    diff : float
        signed difference in [-pi, pi].

    Examples
    --------
    >>> from skpath.math import shortest_angle_diff
    >>> round(shortest_angle_diff(0.1, 2 * np.pi - 0.1), 6)
    0.2
    >>> round(shortest_angle_diff(2 * np.pi - 0.1, 0.1), 6)
    -0.2
    """
    a1_norm = normalize_angle(a1, 0.0, FULL_TURN)
    a2_norm = normalize_angle(a2, 0.0, FULL_TURN)
    return normalize_angle(a1_norm - a2_norm, -pi, pi)


def shortest_angle_dist(a1, a2):
    """Return the unsigned length of the minor arc between two angles."""
    return abs(shortest_angle_diff(a1, a2))


def shortest_angle_dist_with_limits(a1, a2, min_angle, max_angle):
    """Return the distance between two angles without crossing limits.

    This is the minor arc distance, unless moving from ``a2`` along the
    minor arc would leave [min_angle, max_angle]. In that case the major
    arc distance is returned.

    Parameters
    ----------
    a1 : float
        target angle in radian.
    a2 : float
        source angle in radian.
    min_angle : float
        lower joint limit.
    max_angle : float
        upper joint limit.

    Returns
    -------
    dist : float
        distance in [0, 2 * pi).
    """
    diff = shortest_angle_diff(a1, a2)
    if crosses_limits(a2, diff, min_angle, max_angle):
        return FULL_TURN - abs(diff)
    return abs(diff)


def crosses_limits(angle, diff, min_angle, max_angle):
    """Return whether ``angle + diff`` falls outside the limits."""
    return angle + diff > max_angle or angle + diff < min_angle


def sign(x):
    """Return -1, 0 or 1 according to the sign of x."""
    if x > 0:
        return 1
    elif x < 0:
        return -1
    return 0


def to_degrees(angle):
    return float(np.rad2deg(angle))


def to_radians(angle):
    return float(np.deg2rad(angle))
