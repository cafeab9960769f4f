"""Live world model and collaborator contracts for pose application."""

from posesandbox.core.world.context import PoseContext
from posesandbox.core.world.models import JointNode, PropInstance, World
from posesandbox.core.world.protocols import (
    GallerySaveHook,
    Hook,
    NotesSink,
    Notifier,
    PoseFile,
    PropFactory,
    Scene,
)
from posesandbox.core.world.rig import STANDARD_JOINT_NAMES, build_default_rig
from posesandbox.core.world.scene import DefaultPropFactory, InMemoryScene, TextNotes

__all__ = [
    # Models
    "JointNode",
    "PropInstance",
    "World",
    # Context
    "PoseContext",
    # Protocols
    "GallerySaveHook",
    "Hook",
    "NotesSink",
    "Notifier",
    "PoseFile",
    "PropFactory",
    "Scene",
    # Headless implementations
    "DefaultPropFactory",
    "InMemoryScene",
    "TextNotes",
    # Rig
    "STANDARD_JOINT_NAMES",
    "build_default_rig",
]
