# flake8: noqa

import importlib.metadata


__version__ = importlib.metadata.version('scikit-path')


from skpath import exceptions
from skpath import math
from skpath import joint_limits
from skpath import interpolator
from skpath import planner


__all__ = [
    "exceptions",
    "interpolator",
    "joint_limits",
    "math",
    "planner",
]
