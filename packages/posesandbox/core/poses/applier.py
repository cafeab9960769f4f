"""Apply pose documents to a live world.

Two flavours:

- :func:`apply_pose` (full): partial joint overwrite plus a destructive
  rebuild of every prop, then notes. Used for gallery loads and imports.
- :func:`apply_pose_joints_only`: reset every joint to identity, then apply the
  document's joints. Used for discrete presets so a document that names only a
  few joints still yields a fully determined pose.

Both are fail-fast: validation errors propagate to the caller. Malformed
individual entries (unknown joint names, wrong-length quaternions) are silently
skipped.
"""

from __future__ import annotations

import logging
from typing import Any

from posesandbox.core.poses.errors import (
    InvalidPresetError,
    MissingSceneError,
    MissingWorldError,
)
from posesandbox.core.poses.models import PoseDocument, PropDescriptor
from posesandbox.core.world.context import PoseContext
from posesandbox.core.world.models import PropInstance, World

logger = logging.getLogger(__name__)

POSE_LOADED_MESSAGE = "Pose loaded"
PRESET_NO_MATCH_MESSAGE = "Preset loaded (no matching joints)"
PRESET_NO_MATCH_DURATION_MS = 2000


def _require_world(
    context: PoseContext | None, operation: str, *, with_props: bool = True
) -> World:
    world = context.world if context is not None else None
    if world is None or getattr(world, "joints", None) is None:
        raise MissingWorldError(f"{operation}: missing world")
    if with_props and getattr(world, "props", None) is None:
        raise MissingWorldError(f"{operation}: missing world")
    return world


def _apply_joints(world: World, document: PoseDocument) -> int:
    """Overwrite matching joint orientations; return how many were applied."""
    applied = 0
    for joint in world.joints:
        quaternion = document.quaternion_for(joint.name)
        if quaternion is None:
            continue
        joint.quaternion = quaternion
        applied += 1
    return applied


def _configure_prop(prop: PropInstance, prop_type: str, descriptor: PropDescriptor) -> None:
    prop.type = prop_type
    prop.is_pose_prop = True
    if descriptor.position is not None:
        prop.position = descriptor.position
    if descriptor.quaternion is not None:
        prop.quaternion = descriptor.quaternion
    if descriptor.scale is not None:
        prop.scale = descriptor.scale
    if descriptor.name:
        prop.name = descriptor.name


def _rebuild_props(world: World, document: PoseDocument, context: PoseContext) -> int:
    """Replace every live prop with the document's props; return how many were built."""
    assert document.props is not None
    scene = context.scene
    assert scene is not None

    for prop in world.props:
        scene.remove(prop)
    world.props.clear()

    factory = context.prop_factory
    if factory is None:
        if document.props:
            logger.warning(f"No prop factory supplied; dropping {len(document.props)} props")
        return 0

    built = 0
    for descriptor in document.props:
        prop_type = descriptor.resolved_type
        prop = factory(prop_type)
        if prop is None:
            logger.debug(f"Prop factory produced nothing for type {prop_type!r}; skipping")
            continue
        _configure_prop(prop, prop_type, descriptor)
        built += 1
    return built


def _refresh(context: PoseContext) -> None:
    if context.refresh_outline is not None:
        context.refresh_outline()
    if context.force_render is not None:
        context.force_render()


def apply_pose(document: PoseDocument | dict[str, Any] | Any, context: PoseContext | None) -> None:
    """Apply a full pose (joints, props, notes) to the live world.

    Joints named in the document are overwritten absolutely; all other joints
    keep their current orientation. When the document carries a props list the
    live prop set is destroyed and rebuilt in document order (never merged).

    Args:
        document: PoseDocument or decoded JSON mapping (not modified)
        context: World, scene and collaborators

    Raises:
        InvalidPoseError: If document is not a structured pose value
        MissingWorldError: If no world with joint/prop collections is supplied
        MissingSceneError: If no scene is supplied
    """
    pose = PoseDocument.parse(document)
    world = _require_world(context, "apply_pose")
    assert context is not None
    if context.scene is None:
        raise MissingSceneError("apply_pose: missing scene")

    applied_joints = _apply_joints(world, pose) if pose.joints is not None else 0
    built_props = _rebuild_props(world, pose, context) if pose.props is not None else 0

    if context.notes is not None and pose.notes is not None:
        context.notes.value = pose.notes

    _refresh(context)

    logger.debug(f"Applied pose: {applied_joints} joints, {built_props} props")

    if context.notify is not None:
        context.notify(POSE_LOADED_MESSAGE)


def apply_pose_joints_only(
    document: PoseDocument | dict[str, Any] | Any, context: PoseContext | None
) -> int:
    """Apply only the joints of a document, starting from a reset baseline.

    Every joint is first reset to identity through ``context.reset_joints`` so
    joints the document does not mention end up at rest rather than keeping the
    previous pose. Props and notes are never touched.

    Args:
        document: PoseDocument or decoded JSON mapping with a ``joints`` map
        context: World and collaborators (scene not required)

    Returns:
        Number of joints that matched and were applied

    Raises:
        InvalidPoseError: If document is not a structured pose value
        InvalidPresetError: If the document has no joints mapping
        MissingWorldError: If no world is supplied
    """
    pose = PoseDocument.parse(document)
    if pose.joints is None:
        raise InvalidPresetError("Pose missing joints")
    world = _require_world(context, "apply_pose_joints_only", with_props=False)
    assert context is not None

    if context.reset_joints is not None:
        context.reset_joints()

    applied = _apply_joints(world, pose)
    _refresh(context)

    logger.debug(f"Applied preset: {applied}/{len(pose.joints)} joints matched")

    if context.notify is not None:
        if applied == 0:
            context.notify(PRESET_NO_MATCH_MESSAGE, PRESET_NO_MATCH_DURATION_MS)
        else:
            context.notify(f"Preset loaded ({applied} joints)")

    return applied
