"""Prop shape vocabulary and legacy type inference."""

from __future__ import annotations

from enum import Enum


class PropShape(str, Enum):
    """Known prop shape identifiers.

    The vocabulary is informational only. Unknown type strings are passed
    through to the prop factory untouched.
    """

    SPHERE = "sphere"
    CUBE = "cube"
    CYLINDER = "cylinder"
    CONE = "cone"
    TORUS = "torus"
    RING = "ring"
    DISC = "disc"
    PLANE = "plane"
    ICOSA = "icosa"
    OCTA = "octa"
    DODECA = "dodeca"
    TETRA = "tetra"


DEFAULT_PROP_SHAPE = PropShape.CUBE

# Ordered: first match wins ("cyl" rather than "cylinder" so "Cyl_01" resolves).
_NAME_KEYWORDS: tuple[tuple[tuple[str, ...], PropShape], ...] = (
    (("sphere",), PropShape.SPHERE),
    (("cube", "box"), PropShape.CUBE),
    (("cyl",), PropShape.CYLINDER),
    (("cone",), PropShape.CONE),
    (("torus",), PropShape.TORUS),
    (("ring",), PropShape.RING),
    (("disc", "circle"), PropShape.DISC),
    (("plane",), PropShape.PLANE),
    (("icosa",), PropShape.ICOSA),
    (("octa",), PropShape.OCTA),
    (("dodeca",), PropShape.DODECA),
    (("tetra",), PropShape.TETRA),
)


def infer_prop_type(name: str | None) -> str:
    """Infer a prop type from its display name.

    Used for props saved before type tags were stored. Matching is a
    case-insensitive substring search against an ordered keyword list.

    Args:
        name: Prop name (None and empty are allowed)

    Returns:
        Shape type string, ``"cube"`` when nothing matches

    Example:
        >>> infer_prop_type("MySphere_02")
        'sphere'
        >>> infer_prop_type("weird_blob")
        'cube'
    """
    lowered = str(name or "").lower()
    for keywords, shape in _NAME_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return shape.value
    return DEFAULT_PROP_SHAPE.value


def normalize_prop_type(raw_type: object, name: str | None = None) -> str:
    """Resolve the factory key for a prop descriptor.

    Returns the lowercase, trimmed type when present, otherwise falls back to
    :func:`infer_prop_type` on the descriptor name.
    """
    text = str(raw_type or "").strip().lower()
    return text or infer_prop_type(name)
