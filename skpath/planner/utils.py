import numpy as np

from skpath.math import shortest_angle_diff


def euclidean_distance(a, b):
    """Return the Euclidean distance between two points."""
    return float(np.linalg.norm(
        np.asarray(b, dtype=np.float64) - np.asarray(a, dtype=np.float64)))


def joint_space_distance(a, b, continuous_joints=None):
    """Distance between two joint configurations

    Parameters
    ----------
    a : numpy.ndarray or list[float]
        joint angles.
    b : numpy.ndarray or list[float]
        joint angles.
    continuous_joints : list[bool] or None
        for continuous joints the shortest angular difference is used
        instead of the plain difference.

    Returns
    -------
    dist : float
        norm of the per-joint differences.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    diffs = b - a
    if continuous_joints is not None:
        for i, continuous in enumerate(continuous_joints):
            if continuous:
                diffs[i] = shortest_angle_diff(b[i], a[i])
    return float(np.linalg.norm(diffs))


def compute_segment_costs(path, distance_fn=None):
    """Compute the cost of each transition of a path.

    Parameters
    ----------
    path : sequence
        path of ``n`` points.
    distance_fn : callable or None
        ``distance_fn(a, b)`` returns the cost from a to b.
        Euclidean distance is used if ``None``.

    Returns
    -------
    costs : list[float]
        ``n - 1`` segment costs.
    """
    if distance_fn is None:
        distance_fn = euclidean_distance
    return [distance_fn(path[i], path[i + 1])
            for i in range(len(path) - 1)]


def path_cost(path, distance_fn=None):
    return float(sum(compute_segment_costs(path, distance_fn)))
