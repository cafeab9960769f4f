"""Shared utilities for PoseSandbox."""

from posesandbox.core.utils.math import (
    IDENTITY_QUATERNION,
    Quaternion,
    Vector3,
    normalize_quaternion,
    quaternion_from_euler,
    quaternions_close,
)

__all__ = [
    "IDENTITY_QUATERNION",
    "Quaternion",
    "Vector3",
    "normalize_quaternion",
    "quaternion_from_euler",
    "quaternions_close",
]
