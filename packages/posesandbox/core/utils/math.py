"""Math utilities for joint and prop transforms.

Quaternions use three.js array order ``(x, y, z, w)`` throughout so documents
round-trip with the browser app unchanged.
"""

from __future__ import annotations

import numpy as np

Vector3 = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]

IDENTITY_QUATERNION: Quaternion = (0.0, 0.0, 0.0, 1.0)
ZERO_VECTOR: Vector3 = (0.0, 0.0, 0.0)
UNIT_SCALE: Vector3 = (1.0, 1.0, 1.0)


def quaternion_from_euler(x_deg: float, y_deg: float, z_deg: float) -> Quaternion:
    """Convert intrinsic XYZ Euler angles (degrees) to a quaternion.

    Matches three.js ``Quaternion.setFromEuler`` with the default ``"XYZ"``
    order, which is how the app stores joint rotations.

    Args:
        x_deg: Rotation about X in degrees
        y_deg: Rotation about Y in degrees
        z_deg: Rotation about Z in degrees

    Returns:
        Unit quaternion (x, y, z, w)
    """
    half = np.radians(np.array([x_deg, y_deg, z_deg], dtype=float)) / 2.0
    c1, c2, c3 = np.cos(half)
    s1, s2, s3 = np.sin(half)

    q = np.array(
        [
            s1 * c2 * c3 + c1 * s2 * s3,
            c1 * s2 * c3 - s1 * c2 * s3,
            c1 * c2 * s3 + s1 * s2 * c3,
            c1 * c2 * c3 - s1 * s2 * s3,
        ]
    )
    return normalize_quaternion(q)


def normalize_quaternion(q: np.ndarray | tuple[float, ...] | list[float]) -> Quaternion:
    """Scale a quaternion to unit length.

    A degenerate (near-zero) quaternion normalizes to identity.
    """
    arr = np.asarray(q, dtype=float)
    norm = float(np.linalg.norm(arr))
    if norm < 1e-12:
        return IDENTITY_QUATERNION
    x, y, z, w = (arr / norm).tolist()
    return (x, y, z, w)


def quaternions_close(
    a: tuple[float, ...] | list[float],
    b: tuple[float, ...] | list[float],
    atol: float = 1e-6,
) -> bool:
    """Check whether two quaternions are component-wise equal within tolerance.

    ``q`` and ``-q`` describe the same rotation but are NOT treated as equal:
    pose documents store components verbatim.
    """
    if len(a) != len(b):
        return False
    return bool(np.allclose(np.asarray(a, dtype=float), np.asarray(b, dtype=float), atol=atol))


def is_identity(q: tuple[float, ...], atol: float = 1e-9) -> bool:
    return quaternions_close(q, IDENTITY_QUATERNION, atol=atol)
