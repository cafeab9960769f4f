"""Pose document schema.

A pose document is the persisted/exchanged unit: joint orientations keyed by
joint name, an ordered list of prop transforms, and free-text notes.

Wire format (JSON)::

    {
        "version": 1,
        "notes": "",
        "joints": {"hips": [0, 0, 0, 1], ...},
        "props": [
            {"type": "cube", "name": "Box_01", "position": [x, y, z],
             "quaternion": [x, y, z, w], "scale": [x, y, z]},
        ],
        "savedAt": "2026-01-29T12:00:00.000000+00:00"
    }

Parsing is lenient so documents written by older builds of the app still
load: malformed joint entries are dropped or kept for the applier to
ignore, and unknown fields are discarded.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from posesandbox.core.poses.errors import InvalidPoseError
from posesandbox.core.poses.inference import normalize_prop_type
from posesandbox.core.utils.math import Quaternion, Vector3

POSE_SCHEMA_VERSION = 1


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _numeric_tuple(value: Any, length: int) -> tuple[float, ...] | None:
    """Return ``value`` as floats if it is a numeric list of exactly ``length`` items."""
    if not isinstance(value, (list, tuple)) or len(value) != length:
        return None
    if not all(_is_number(c) for c in value):
        return None
    return tuple(float(c) for c in value)


class PropDescriptor(BaseModel):
    """Serialized transform and type of a single prop.

    All fields are optional when parsing; a missing transform component leaves
    the freshly created prop at its factory default. A malformed component
    (wrong length, non-numeric) is dropped the same way.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str | None = Field(default=None, description="Shape type tag (e.g. 'sphere')")
    name: str | None = Field(default=None, description="Display name, may be empty")
    position: Vector3 | None = Field(default=None, description="World position [x, y, z]")
    quaternion: Quaternion | None = Field(
        default=None, description="Orientation quaternion [x, y, z, w]"
    )
    scale: Vector3 | None = Field(default=None, description="Scale [x, y, z]")

    @field_validator("type", "name", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> str | None:
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("position", "scale", mode="before")
    @classmethod
    def _coerce_vector(cls, v: Any) -> tuple[float, ...] | None:
        return _numeric_tuple(v, 3)

    @field_validator("quaternion", mode="before")
    @classmethod
    def _coerce_quaternion(cls, v: Any) -> tuple[float, ...] | None:
        return _numeric_tuple(v, 4)

    @property
    def resolved_type(self) -> str:
        """Factory key: trimmed lowercase type, or inferred from the name."""
        return normalize_prop_type(self.type, self.name)


class PoseDocument(BaseModel):
    """Versioned pose document.

    Immutable once constructed. ``joints`` and ``props`` are ``None`` when the
    source document carried no usable value for them, which callers treat as
    "leave this part of the world alone".
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    version: int = Field(default=POSE_SCHEMA_VERSION, description="Schema version (unenforced)")
    notes: str | None = Field(default=None, description="Free-text pose notes")
    joints: dict[str, tuple[float, ...]] | None = Field(
        default=None, description="Joint name -> quaternion [x, y, z, w]"
    )
    props: tuple[PropDescriptor, ...] | None = Field(
        default=None, description="Ordered prop descriptors"
    )
    saved_at: str | None = Field(
        default=None, alias="savedAt", description="ISO-8601 capture timestamp"
    )

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, v: Any) -> int:
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        return POSE_SCHEMA_VERSION

    @field_validator("notes", mode="before")
    @classmethod
    def _coerce_notes(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @field_validator("joints", mode="before")
    @classmethod
    def _coerce_joints(cls, v: Any) -> dict[str, tuple[float, ...]] | None:
        # Non-numeric entries can never be applied, so they are dropped here.
        # Wrong-length numeric entries are kept; the applier skips them.
        if not isinstance(v, Mapping):
            return None
        coerced: dict[str, tuple[float, ...]] = {}
        for name, value in v.items():
            if isinstance(value, (list, tuple)) and all(_is_number(c) for c in value):
                coerced[str(name)] = tuple(float(c) for c in value)
        return coerced

    @field_validator("props", mode="before")
    @classmethod
    def _coerce_props(cls, v: Any) -> list[Any] | None:
        if not isinstance(v, (list, tuple)):
            return None
        coerced: list[Any] = []
        for entry in v:
            if isinstance(entry, PropDescriptor):
                coerced.append(entry)
            elif isinstance(entry, Mapping):
                coerced.append(dict(entry))
            else:
                # Null/garbage entries still rebuild as a default prop.
                coerced.append({})
        return coerced

    @classmethod
    def parse(cls, data: Any) -> PoseDocument:
        """Build a document from a decoded JSON value.

        Args:
            data: PoseDocument instance or mapping decoded from JSON

        Returns:
            PoseDocument

        Raises:
            InvalidPoseError: If data is not a mapping or cannot be coerced
        """
        if isinstance(data, PoseDocument):
            return data
        if not isinstance(data, Mapping):
            raise InvalidPoseError(
                f"Invalid pose JSON: expected an object, got {type(data).__name__}"
            )
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise InvalidPoseError(f"Invalid pose JSON: {e}") from e

    @classmethod
    def parse_json(cls, text: str) -> PoseDocument:
        """Decode JSON text and parse it.

        Raises:
            json.JSONDecodeError: If text is not valid JSON
            InvalidPoseError: If the decoded value is not a pose document
        """
        return cls.parse(json.loads(text))

    def quaternion_for(self, joint_name: str) -> Quaternion | None:
        """Return the joint's quaternion if present with exactly four components."""
        if self.joints is None:
            return None
        value = self.joints.get(joint_name)
        if value is None or len(value) != 4:
            return None
        return (value[0], value[1], value[2], value[3])

    def to_dict(self) -> dict[str, Any]:
        """Dump to the JSON wire shape (camelCase ``savedAt``, lists not tuples)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)
