"""Pose context: the world plus every collaborator an apply call may touch."""

from __future__ import annotations

from dataclasses import dataclass

from posesandbox.core.world.models import World
from posesandbox.core.world.protocols import Hook, NotesSink, Notifier, PropFactory, Scene
from posesandbox.core.world.rig import build_default_rig
from posesandbox.core.world.scene import DefaultPropFactory, InMemoryScene, TextNotes


@dataclass
class PoseContext:
    """Shared world and scene plus the callbacks pose operations fire.

    Only ``world`` (and ``scene`` for a full apply) are required; every other
    collaborator is optional and skipped when None.

    Attributes:
        world: Live joints and props
        scene: Scene props are attached to
        prop_factory: Creates props during a full apply
        notes: Notes sink restored from / captured into documents
        notify: Toast callback
        refresh_outline: Outline/silhouette refresh hook
        force_render: Single forced render hook
        reset_joints: Resets every joint to identity (joints-only apply)

    Example:
        >>> context = PoseContext.headless()
        >>> apply_pose(document, context)
    """

    world: World | None
    scene: Scene | None = None
    prop_factory: PropFactory | None = None
    notes: NotesSink | None = None
    notify: Notifier | None = None
    refresh_outline: Hook | None = None
    force_render: Hook | None = None
    reset_joints: Hook | None = None

    @classmethod
    def headless(
        cls,
        world: World | None = None,
        *,
        notify: Notifier | None = None,
    ) -> PoseContext:
        """Build a fully wired in-memory context around a world.

        Args:
            world: World to wrap (defaults to the standard rig)
            notify: Optional toast callback

        Returns:
            PoseContext with in-memory scene, default prop factory and notes
        """
        if world is None:
            world = build_default_rig()
        scene = InMemoryScene()
        for prop in world.props:
            scene.add(prop)
        return cls(
            world=world,
            scene=scene,
            prop_factory=DefaultPropFactory(world, scene),
            notes=TextNotes(),
            notify=notify,
            reset_joints=world.reset_joint_rotations,
        )
