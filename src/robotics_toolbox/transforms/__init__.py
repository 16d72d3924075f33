"""
Closed-form spatial transforms in JAX.

Three layers, each built on the previous one:
- rotation: primitive rotation generators (rot2, rotx, roty, rotz)
- transform: homogeneous transforms (r2t, t2r, trot*, se2, se3)
- rpy: roll-pitch-yaw conversions (rpy2r, rpy2t, rpy2jac, tr2rpy)

All functions are pure and stateless, and map over leading batch dimensions.
"""

from . import rotation
from . import transform
from . import rpy

from .rotation import rot, rot2, rotx, roty, rotz
from .transform import r2t, se2, se3, t2r, transl, trot, trot2, trotx, troty, trotz
from .rpy import rpy2jac, rpy2r, rpy2t, tr2rpy

__all__ = [
    "rotation",
    "transform",
    "rpy",
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
