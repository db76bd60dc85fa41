# flake8: noqa

from skpath.planner.path_generators import JointInterpolationPathGenerator
from skpath.planner.path_generators import LinearPathGenerator
from skpath.planner.path_generators import PathGenerator

from skpath.planner.shortcut import less_equal
from skpath.planner.shortcut import shortcut_path
from skpath.planner.shortcut import ToleranceCostComparator

from skpath.planner.utils import compute_segment_costs
from skpath.planner.utils import euclidean_distance
from skpath.planner.utils import joint_space_distance
from skpath.planner.utils import path_cost
