class PathError(ValueError):
    """Base class of the errors raised by interpolation and shortcutting.

    ``kind`` names the failure so that callers can dispatch on it
    without matching on the message.
    """

    kind = None


class DimensionMismatchError(PathError):
    """Parallel vectors (start, end, limits, ...) differ in length."""

    kind = 'dimension_mismatch'


class InvalidLimitsError(PathError):
    """A declared minimum limit is greater than its maximum."""

    kind = 'invalid_limits'


class UnnormalizableValueError(PathError):
    """An angle cannot be placed inside its range even after wrapping."""

    kind = 'unnormalizable_value'


class MalformedCostSeriesError(PathError):
    """The number of segment costs is not the path length minus one."""

    kind = 'malformed_cost_series'
