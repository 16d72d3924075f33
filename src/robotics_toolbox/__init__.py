"""
Robotics Toolbox: closed-form spatial transforms for robotics and kinematics.

Rotation matrices, homogeneous transforms and roll-pitch-yaw conversions as
pure, JIT-compilable JAX functions.
"""

import logging

import jax
jax.config.update("jax_enable_x64", True)

from . import core
from . import transforms
from .core import (
    Axis,
    AxisOrder,
    Units,
    InvalidAxisError,
    InvalidAxisOrderError,
    InvalidShapeError,
    InvalidUnitsError,
    TransformError,
)
from .transforms import (
    r2t,
    rot,
    rot2,
    rotx,
    roty,
    rotz,
    rpy2jac,
    rpy2r,
    rpy2t,
    se2,
    se3,
    t2r,
    tr2rpy,
    transl,
    trot,
    trot2,
    trotx,
    troty,
    trotz,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "core",
    "transforms",
    "Axis",
    "AxisOrder",
    "Units",
    "TransformError",
    "InvalidUnitsError",
    "InvalidAxisError",
    "InvalidAxisOrderError",
    "InvalidShapeError",
    "rot",
    "rot2",
    "rotx",
    "roty",
    "rotz",
    "trot",
    "trot2",
    "trotx",
    "troty",
    "trotz",
    "se2",
    "se3",
    "r2t",
    "t2r",
    "transl",
    "rpy2r",
    "rpy2t",
    "rpy2jac",
    "tr2rpy",
]
