"""Angle units, axis selectors and argument checks shared by every transform.

Selectors are closed string enums. Each public function coerces its selector
arguments through ``as_units`` / ``as_axis`` / ``as_axis_order`` before doing
any math, so an unknown value fails immediately with the matching error.
"""

import logging
from enum import Enum
from typing import Tuple, Union

import jax
import jax.numpy as jnp

from .errors import (
    InvalidAxisError,
    InvalidAxisOrderError,
    InvalidShapeError,
    InvalidUnitsError,
)

logger = logging.getLogger(__name__)

Array = jax.Array
Scalar = Union[float, Array]


class Units(str, Enum):
    """Angle units."""

    RADIANS = "radians"
    DEGREES = "degrees"


class Axis(str, Enum):
    """Principal axis of a single-axis rotation."""

    X = "x"
    Y = "y"
    Z = "z"


class AxisOrder(str, Enum):
    """Order in which roll, pitch and yaw rotations are composed."""

    XYZ = "xyz"
    ZYX = "zyx"


def _coerce(enum_cls, value, error_cls, argname: str):
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        expected = ", ".join(repr(m.value) for m in enum_cls)
        logger.debug("Rejected %s=%r", argname, value)
        raise error_cls(f"Expected one of ({expected}) for argument {argname}, got {value!r}.") from None


def as_units(value: Union[Units, str]) -> Units:
    return _coerce(Units, value, InvalidUnitsError, "units")


def as_axis(value: Union[Axis, str]) -> Axis:
    return _coerce(Axis, value, InvalidAxisError, "axis")


def as_axis_order(value: Union[AxisOrder, str]) -> AxisOrder:
    return _coerce(AxisOrder, value, InvalidAxisOrderError, "axis_order")


def as_float_array(x) -> Array:
    """Convert to a JAX array, promoting integer and bool input to float."""
    x = jnp.asarray(x)
    if not jnp.issubdtype(x.dtype, jnp.floating):
        x = x.astype(float)
    return x


def to_radians(angle: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """
    Convert angle(s) given in ``units`` to radians.

    Args:
        angle: scalar or array of angles
        units: units ``angle`` is expressed in

    Returns:
        Array of the same shape, in radians
    """
    units = as_units(units)
    angle = as_float_array(angle)
    if units is Units.DEGREES:
        return jnp.deg2rad(angle)
    return angle


def from_radians(angle: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """Convert angle(s) in radians to ``units``. Inverse of ``to_radians``."""
    units = as_units(units)
    angle = as_float_array(angle)
    if units is Units.DEGREES:
        return jnp.rad2deg(angle)
    return angle


def check_square(matrix, orders: Tuple[int, ...], argname: str) -> Array:
    """
    Validate that the trailing two dimensions of ``matrix`` are (n, n), n in ``orders``.

    Leading dimensions are treated as batch dimensions and left alone.

    Args:
        matrix: array-like of shape (..., n, n)
        orders: accepted values of n
        argname: parameter name used in the error message

    Returns:
        ``matrix`` as a floating point JAX array

    Raises:
        InvalidShapeError: if the shape is not accepted
    """
    matrix = as_float_array(matrix)
    shape = matrix.shape
    if len(shape) < 2 or shape[-1] != shape[-2] or shape[-1] not in orders:
        expected = " or ".join(f"(..., {n}, {n})" for n in orders)
        logger.debug("Rejected %s with shape %s", argname, shape)
        raise InvalidShapeError(f"Expected array of size {expected} for argument {argname}, instead had size {shape}.")
    return matrix
