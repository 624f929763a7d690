"""Math utilities namespace."""

from .quat import (  # noqa: F401
    quat_conj,
    quat_from_arc,
    quat_from_axis_angle,
    quat_identity,
    quat_mul,
    quat_normalize,
    quat_rotate,
    quat_to_rotmat,
)
from .vector import as_vec, cross, dot, unit  # noqa: F401
