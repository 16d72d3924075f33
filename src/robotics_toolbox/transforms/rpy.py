"""Conversions between roll-pitch-yaw angles and rotations/transforms.

Two composition orders are supported:

* ``xyz``: R = Rx(roll) @ Ry(pitch) @ Rz(yaw)
* ``zyx``: R = Rz(roll) @ Ry(pitch) @ Rx(yaw)

At gimbal lock the decomposition is not unique; ``tr2rpy`` resolves it by
fixing roll to zero.
"""

from typing import Union

import jax
import jax.numpy as jnp

from ..core.conventions import (
    AxisOrder,
    Scalar,
    Units,
    as_axis_order,
    as_units,
    check_square,
    from_radians,
    to_radians,
)
from .rotation import rotx, roty, rotz
from .transform import r2t

Array = jax.Array


def rpy2r(
    roll: Scalar,
    pitch: Scalar,
    yaw: Scalar,
    units: Union[Units, str] = Units.RADIANS,
    axis_order: Union[AxisOrder, str] = AxisOrder.XYZ,
) -> Array:
    """
    Rotation matrix from roll, pitch and yaw angles.

    Args:
        roll: first rotation angle
        pitch: second rotation angle
        yaw: third rotation angle
        units: units of the three angles
        axis_order: 'xyz' or 'zyx'

    Returns:
        (..., 3, 3) rotation matrix

    Raises:
        InvalidAxisOrderError: if ``axis_order`` is not xyz or zyx
        InvalidUnitsError: if ``units`` is not radians or degrees
    """
    axis_order = as_axis_order(axis_order)
    units = as_units(units)

    if axis_order is AxisOrder.XYZ:
        return rotx(roll, units) @ roty(pitch, units) @ rotz(yaw, units)
    return rotz(roll, units) @ roty(pitch, units) @ rotx(yaw, units)


def rpy2t(
    roll: Scalar,
    pitch: Scalar,
    yaw: Scalar,
    units: Union[Units, str] = Units.RADIANS,
    axis_order: Union[AxisOrder, str] = AxisOrder.XYZ,
) -> Array:
    """Same as ``rpy2r`` but returns a (..., 4, 4) homogeneous transform."""
    return r2t(rpy2r(roll, pitch, yaw, units, axis_order))


def rpy2jac(roll: Scalar, pitch: Scalar, yaw: Scalar, units: Union[Units, str] = Units.RADIANS) -> Array:
    """
    Analytical Jacobian mapping roll-pitch-yaw rates to angular velocity.

    Uses the xyz convention. Yaw does not appear in the result but is
    accepted so the signature matches ``rpy2r``.

    Returns:
        (..., 3, 3) array
        [[1, 0, sin(p)], [0, cos(r), -cos(p) sin(r)], [0, sin(r), cos(p) cos(r)]]
    """
    units = as_units(units)
    roll = to_radians(roll, units)
    pitch = to_radians(pitch, units)
    del yaw

    batch_shape = jnp.broadcast_shapes(roll.shape, pitch.shape)
    roll = jnp.broadcast_to(roll, batch_shape)
    pitch = jnp.broadcast_to(pitch, batch_shape)

    sr, cr = jnp.sin(roll), jnp.cos(roll)
    sp, cp = jnp.sin(pitch), jnp.cos(pitch)

    J = jnp.broadcast_to(jnp.eye(3, dtype=roll.dtype), batch_shape + (3, 3))
    J = J.at[..., 0, 2].set(sp)
    J = J.at[..., 1, 1].set(cr)
    J = J.at[..., 1, 2].set(-cp * sr)
    J = J.at[..., 2, 1].set(sr)
    J = J.at[..., 2, 2].set(cp * cr)
    return J


def _tr2rpy_xyz(M: Array, eps) -> Array:
    m11, m12, m13 = M[..., 0, 0], M[..., 0, 1], M[..., 0, 2]
    m21, m22, m23 = M[..., 1, 0], M[..., 1, 1], M[..., 1, 2]
    m33 = M[..., 2, 2]

    # Pitch at +/- pi/2: roll and yaw share an axis.
    singular = (jnp.abs(m23) < eps) & (jnp.abs(m33) < eps)

    roll = jnp.arctan2(-m23, m33)
    pitch = jnp.arctan2(m13, jnp.cos(roll) * m33 - jnp.sin(roll) * m23)
    yaw = jnp.arctan2(-m12, m11)

    roll = jnp.where(singular, 0.0, roll)
    pitch = jnp.where(singular, jnp.arctan2(m13, m33), pitch)
    yaw = jnp.where(singular, jnp.arctan2(m21, m22), yaw)
    return jnp.stack([roll, pitch, yaw], axis=-1)


def _tr2rpy_zyx(M: Array, eps) -> Array:
    m11, m12, m13 = M[..., 0, 0], M[..., 0, 1], M[..., 0, 2]
    m21, m22, m23 = M[..., 1, 0], M[..., 1, 1], M[..., 1, 2]
    m31 = M[..., 2, 0]

    singular = (jnp.abs(m11) < eps) & (jnp.abs(m21) < eps)

    roll = jnp.arctan2(m21, m11)
    sr, cr = jnp.sin(roll), jnp.cos(roll)
    pitch = jnp.arctan2(-m31, cr * m11 + sr * m21)
    yaw = jnp.arctan2(sr * m13 - cr * m23, cr * m22 - sr * m12)

    roll = jnp.where(singular, 0.0, roll)
    pitch = jnp.where(singular, jnp.arctan2(-m31, m11), pitch)
    yaw = jnp.where(singular, jnp.arctan2(-m23, m22), yaw)
    return jnp.stack([roll, pitch, yaw], axis=-1)


def tr2rpy(
    M,
    units: Union[Units, str] = Units.RADIANS,
    axis_order: Union[AxisOrder, str] = AxisOrder.XYZ,
) -> Array:
    """
    Roll, pitch and yaw angles of a rotation matrix or homogeneous transform.

    Inverse of ``rpy2r`` / ``rpy2t`` away from gimbal lock. At gimbal lock
    (the two entries tested are both within machine epsilon of zero) roll is
    set to 0 and the whole rotation is attributed to pitch and yaw.

    Args:
        M: (..., 3, 3) rotation matrix or (..., 4, 4) homogeneous transform
        units: units of the returned angles
        axis_order: 'xyz' or 'zyx'

    Returns:
        (..., 3) array [roll, pitch, yaw]

    Raises:
        InvalidShapeError: if M is not of order 3 or 4
        InvalidAxisOrderError: if ``axis_order`` is not xyz or zyx
        InvalidUnitsError: if ``units`` is not radians or degrees
    """
    axis_order = as_axis_order(axis_order)
    units = as_units(units)
    M = check_square(M, (3, 4), "M")

    eps = jnp.finfo(M.dtype).eps
    if axis_order is AxisOrder.XYZ:
        angles = _tr2rpy_xyz(M, eps)
    else:
        angles = _tr2rpy_zyx(M, eps)

    return from_radians(angles, units)
