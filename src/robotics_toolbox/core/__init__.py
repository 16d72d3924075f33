"""Selectors, argument validation and the error taxonomy for robotics_toolbox.

Every transform function routes its ``units`` / ``axis`` / ``axis_order``
arguments and its matrix inputs through this package before computing.
"""

from .conventions import (
    Axis,
    AxisOrder,
    Units,
    as_axis,
    as_axis_order,
    as_units,
    check_square,
    from_radians,
    to_radians,
)
from .errors import (
    InvalidAxisError,
    InvalidAxisOrderError,
    InvalidShapeError,
    InvalidUnitsError,
    TransformError,
)

__all__ = [
    "Axis",
    "AxisOrder",
    "Units",
    "as_axis",
    "as_axis_order",
    "as_units",
    "check_square",
    "from_radians",
    "to_radians",
    "TransformError",
    "InvalidUnitsError",
    "InvalidAxisError",
    "InvalidAxisOrderError",
    "InvalidShapeError",
]
