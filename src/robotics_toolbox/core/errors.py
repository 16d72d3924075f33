"""Exceptions raised when transform functions are called with bad arguments.

All of these are usage errors detected before any computation runs, so a
function either returns a complete result or raises.
"""


class TransformError(ValueError):
    """Base class for argument errors raised by robotics_toolbox."""


class InvalidUnitsError(TransformError):
    """The ``units`` selector is not one of radians / degrees."""


class InvalidAxisError(TransformError):
    """The ``axis`` selector is not one of x / y / z."""


class InvalidAxisOrderError(TransformError):
    """The ``axis_order`` selector is not one of xyz / zyx."""


class InvalidShapeError(TransformError):
    """A matrix argument does not have one of the accepted square shapes."""
