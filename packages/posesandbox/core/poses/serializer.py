"""Capture live world state into a pose document."""

from __future__ import annotations

from datetime import UTC, datetime
import logging

from posesandbox.core.poses.errors import MissingWorldError
from posesandbox.core.poses.inference import infer_prop_type
from posesandbox.core.poses.models import POSE_SCHEMA_VERSION, PoseDocument, PropDescriptor
from posesandbox.core.world.models import PropInstance, World
from posesandbox.core.world.protocols import NotesSink

logger = logging.getLogger(__name__)


def now_iso() -> str:
    """Current UTC time as an ISO-8601 string."""
    return datetime.now(tz=UTC).isoformat()


def _read_notes(notes: NotesSink | str | None) -> str:
    if notes is None:
        return ""
    if isinstance(notes, str):
        return notes
    return str(getattr(notes, "value", "") or "")


def _describe_prop(prop: PropInstance) -> PropDescriptor:
    return PropDescriptor(
        type=str(prop.type or infer_prop_type(prop.name)),
        name=prop.name or "",
        position=tuple(prop.position),
        quaternion=tuple(prop.quaternion),
        scale=tuple(prop.scale),
    )


def serialize_pose(world: World | None, notes: NotesSink | str | None = None) -> PoseDocument:
    """Capture joint orientations, prop transforms and notes.

    Joints are keyed by name; if two joints share a name the later one wins.
    Props without a stored type tag get one inferred from their name.

    Args:
        world: Live world to read (not modified)
        notes: Notes sink or plain string (empty when None)

    Returns:
        New immutable PoseDocument stamped with the capture time

    Raises:
        MissingWorldError: If world or its joint/prop collections are missing
    """
    if (
        world is None
        or getattr(world, "joints", None) is None
        or getattr(world, "props", None) is None
    ):
        raise MissingWorldError("serialize_pose: missing world")

    joints = {name: tuple(joint.quaternion) for name, joint in world.joint_map().items()}
    props = [_describe_prop(prop) for prop in world.props]

    logger.debug(f"Serialized pose: {len(joints)} joints, {len(props)} props")

    return PoseDocument(
        version=POSE_SCHEMA_VERSION,
        notes=_read_notes(notes),
        joints=joints,
        props=props,
        saved_at=now_iso(),
    )
