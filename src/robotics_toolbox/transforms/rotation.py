"""Primitive rotation generators in JAX.

Rotation matrices about a single axis, in 2D and 3D. All functions accept a
scalar angle or an array of angles; an angle array of shape S gives matrices
of shape S + (n, n).
"""

from typing import Union

import jax
import jax.numpy as jnp

from ..core.conventions import Axis, Scalar, Units, as_axis, to_radians

Array = jax.Array

# Row/column pair spanning the plane each principal axis rotates.
_PLANES = {
    Axis.X: (1, 2),
    Axis.Y: (2, 0),
    Axis.Z: (0, 1),
}


def _planar_rotation(theta: Array, order: int, i: int, j: int) -> Array:
    """Identity of the given order with the (i, j) plane rotated by theta."""
    c = jnp.cos(theta)
    s = jnp.sin(theta)

    R = jnp.broadcast_to(jnp.eye(order, dtype=theta.dtype), theta.shape + (order, order))
    R = R.at[..., i, i].set(c)
    R = R.at[..., i, j].set(-s)
    R = R.at[..., j, i].set(s)
    R = R.at[..., j, j].set(c)
    return R


def rot2(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """
    2D rotation matrix, counterclockwise by theta.

    Args:
        theta: rotation angle(s)
        units: units of ``theta``

    Returns:
        (..., 2, 2) array [[cos, -sin], [sin, cos]]
    """
    theta = to_radians(theta, units)
    return _planar_rotation(theta, 2, 0, 1)


def rot(theta: Scalar, axis: Union[Axis, str], units: Union[Units, str] = Units.RADIANS) -> Array:
    """
    3D rotation matrix about a principal axis.

    Args:
        theta: rotation angle(s)
        axis: one of 'x', 'y', 'z'
        units: units of ``theta``

    Returns:
        (..., 3, 3) right-handed rotation matrix

    Raises:
        InvalidAxisError: if ``axis`` is not x, y or z
        InvalidUnitsError: if ``units`` is not radians or degrees
    """
    axis = as_axis(axis)
    theta = to_radians(theta, units)
    return _planar_rotation(theta, 3, *_PLANES[axis])


def rotx(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """Rotation about the x axis."""
    return rot(theta, Axis.X, units)


def roty(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """Rotation about the y axis."""
    return rot(theta, Axis.Y, units)


def rotz(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """Rotation about the z axis."""
    return rot(theta, Axis.Z, units)
