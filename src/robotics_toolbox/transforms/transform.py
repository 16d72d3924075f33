"""Homogeneous transforms built from the primitive rotations.

A homogeneous transform of order n + 1 has the block structure
[[R, t], [0, 1]] with R an (n, n) rotation and t an (n,) translation.
Matrix arguments may carry leading batch dimensions: a stack of N matrices is
an (N, n, n) array and every function maps over it element-wise, keeping order.
"""

from typing import Union

import jax
import jax.numpy as jnp

from ..core.conventions import Axis, Scalar, Units, as_float_array, check_square, to_radians
from .rotation import rot, rot2

Array = jax.Array


def r2t(R) -> Array:
    """
    Lift rotation matrix to a homogeneous transform with zero translation.

    Orthonormality of ``R`` is not checked.

    Args:
        R: (..., 2, 2) or (..., 3, 3) rotation matrix

    Returns:
        (..., 3, 3) or (..., 4, 4) homogeneous transform

    Raises:
        InvalidShapeError: if R is not of order 2 or 3
    """
    R = check_square(R, (2, 3), "R")
    n = R.shape[-1]

    T = jnp.broadcast_to(jnp.eye(n + 1, dtype=R.dtype), R.shape[:-2] + (n + 1, n + 1))
    T = T.at[..., :n, :n].set(R)
    return T


def t2r(T) -> Array:
    """
    Extract the rotation block of a homogeneous transform.

    Translation is discarded and orthonormality is not checked.

    Args:
        T: (..., 3, 3) or (..., 4, 4) homogeneous transform

    Returns:
        (..., 2, 2) or (..., 3, 3) rotation matrix

    Raises:
        InvalidShapeError: if T is not of order 3 or 4
    """
    T = check_square(T, (3, 4), "T")
    return T[..., :-1, :-1]


def transl(T) -> Array:
    """
    Extract the translation column of a homogeneous transform.

    Args:
        T: (..., 3, 3) or (..., 4, 4) homogeneous transform

    Returns:
        (..., 2) or (..., 3) translation vector
    """
    T = check_square(T, (3, 4), "T")
    return T[..., :-1, -1]


def trot2(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """Planar rotation by theta as a (..., 3, 3) homogeneous transform."""
    return r2t(rot2(theta, units))


def trot(theta: Scalar, axis: Union[Axis, str], units: Union[Units, str] = Units.RADIANS) -> Array:
    """
    Rotation about a principal axis as a (..., 4, 4) homogeneous transform.

    Raises:
        InvalidAxisError: if ``axis`` is not x, y or z
    """
    return r2t(rot(theta, axis, units))


def trotx(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    return trot(theta, Axis.X, units)


def troty(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    return trot(theta, Axis.Y, units)


def trotz(theta: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    return trot(theta, Axis.Z, units)


def se2(x: Scalar, y: Scalar, theta: Scalar = 0.0, units: Union[Units, str] = Units.RADIANS) -> Array:
    """
    Planar rigid-body transform.

    Arguments broadcast against each other, so arrays of poses are supported.

    Args:
        x: translation along x
        y: translation along y
        theta: rotation angle
        units: units of ``theta``

    Returns:
        (..., 3, 3) array [[cos, -sin, x], [sin, cos, y], [0, 0, 1]]
    """
    theta = to_radians(theta, units)
    x = as_float_array(x)
    y = as_float_array(y)
    batch_shape = jnp.broadcast_shapes(x.shape, y.shape, theta.shape)

    T = trot2(jnp.broadcast_to(theta, batch_shape))
    T = T.at[..., 0, 2].set(jnp.broadcast_to(x, batch_shape))
    T = T.at[..., 1, 2].set(jnp.broadcast_to(y, batch_shape))
    return T


def se3(T) -> Array:
    """
    Lift a planar transform to 3D.

    The 2D rotation and translation are kept in the xy plane; z gets an
    identity axis and zero translation.

    Args:
        T: (..., 3, 3) planar homogeneous transform

    Returns:
        (..., 4, 4) array [[R, 0, t], [0, 0, 1, 0], [0, 0, 0, 1]]

    Raises:
        InvalidShapeError: if T is not of order 3
    """
    T = check_square(T, (3,), "T")

    out = jnp.broadcast_to(jnp.eye(4, dtype=T.dtype), T.shape[:-2] + (4, 4))
    out = out.at[..., :2, :2].set(T[..., :2, :2])
    out = out.at[..., :2, 3].set(T[..., :2, 2])
    return out
