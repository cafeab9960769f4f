"""Pose serialization, application and import.

Example:
    >>> from posesandbox.core.poses import apply_pose, serialize_pose
    >>> from posesandbox.core.world import PoseContext
    >>> context = PoseContext.headless()
    >>> document = serialize_pose(context.world, context.notes)
    >>> apply_pose(document, context)
"""

from posesandbox.core.poses.applier import apply_pose, apply_pose_joints_only
from posesandbox.core.poses.errors import (
    InvalidPoseError,
    InvalidPresetError,
    MissingSceneError,
    MissingWorldError,
    PoseError,
)
from posesandbox.core.poses.importer import ImportHooks, LocalPoseFile, import_pose_pack
from posesandbox.core.poses.inference import PropShape, infer_prop_type
from posesandbox.core.poses.models import POSE_SCHEMA_VERSION, PoseDocument, PropDescriptor
from posesandbox.core.poses.presets import (
    STANDARD_PRESETS,
    Preset,
    PresetConfig,
    PresetLibrary,
    all_presets,
    resolve_preset,
)
from posesandbox.core.poses.serializer import serialize_pose

__all__ = [
    # Schema
    "POSE_SCHEMA_VERSION",
    "PoseDocument",
    "PropDescriptor",
    "PropShape",
    "infer_prop_type",
    # Operations
    "serialize_pose",
    "apply_pose",
    "apply_pose_joints_only",
    "import_pose_pack",
    "ImportHooks",
    "LocalPoseFile",
    # Presets
    "Preset",
    "PresetConfig",
    "PresetLibrary",
    "STANDARD_PRESETS",
    "all_presets",
    "resolve_preset",
    # Errors
    "PoseError",
    "MissingWorldError",
    "MissingSceneError",
    "InvalidPoseError",
    "InvalidPresetError",
]
