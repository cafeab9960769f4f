"""Shared pytest fixtures for posesandbox tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from posesandbox.core.world import (
    DefaultPropFactory,
    InMemoryScene,
    JointNode,
    PoseContext,
    PropInstance,
    TextNotes,
    World,
    build_default_rig,
)

# ============================================================================
# Recording collaborators
# ============================================================================


class RecordingNotifier:
    """Notifier that records (message, duration_ms) calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int | None]] = []

    def __call__(self, message: str, duration_ms: int | None = None) -> None:
        self.calls.append((message, duration_ms))

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.calls]


class CallCounter:
    """Argument-less hook that counts invocations."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> None:
        self.count += 1


class RecordingGallery:
    """GallerySaveHook that records saves and a snapshot of joint state."""

    def __init__(self, world: World | None = None) -> None:
        self.world = world
        self.saves: list[dict] = []

    def __call__(self, *, name: str, with_toast: bool) -> None:
        snapshot = {}
        if self.world is not None:
            snapshot = {j.name: j.quaternion for j in self.world.joints}
        self.saves.append({"name": name, "with_toast": with_toast, "joints": snapshot})

    @property
    def names(self) -> list[str]:
        return [save["name"] for save in self.saves]


class MemoryPoseFile:
    """In-memory PoseFile; raises ``error`` on read when set."""

    def __init__(self, name: str, text: str = "", error: Exception | None = None) -> None:
        self._name = name
        self.text = text
        self.error = error
        self.reads = 0

    @property
    def name(self) -> str:
        return self._name

    async def read_text(self) -> str:
        self.reads += 1
        if self.error is not None:
            raise self.error
        return self.text


# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Get test fixtures directory."""
    return Path(__file__).parent / "fixtures"


# ============================================================================
# World Fixtures
# ============================================================================

ROTATED_HEAD = (0.0, 0.38268343, 0.0, 0.92387953)  # 45 deg about Y
ROTATED_ELBOW = (0.5, 0.0, 0.0, 0.8660254)  # 60 deg about X


def get_joint(world: World, name: str) -> JointNode:
    """Look up a joint by name (KeyError when absent)."""
    return world.joint_map()[name]


def rotation_angle_deg(a: tuple[float, ...], b: tuple[float, ...]) -> float:
    """Smallest rotation angle (degrees) taking orientation ``a`` to ``b``."""
    dot = abs(float(np.dot(np.asarray(a, dtype=float), np.asarray(b, dtype=float))))
    return float(np.degrees(2.0 * np.arccos(np.clip(dot, -1.0, 1.0))))


@pytest.fixture
def world() -> World:
    """Small world: three joints (one rotated) and two props."""
    return World(
        joints=[
            JointNode(name="hips"),
            JointNode(name="head", quaternion=ROTATED_HEAD),
            JointNode(name="l_elbow", quaternion=ROTATED_ELBOW),
        ],
        props=[
            PropInstance(
                type="sphere",
                name="Ball",
                position=(1.0, 2.0, 3.0),
                quaternion=(0.0, 0.0, 0.0, 1.0),
                scale=(0.5, 0.5, 0.5),
            ),
            PropInstance(
                type=None,
                name="Torus_legacy",
                position=(-1.0, 0.0, 2.5),
                quaternion=(0.0, 0.70710678, 0.0, 0.70710678),
                scale=(1.0, 2.0, 1.0),
            ),
        ],
    )


@pytest.fixture
def fresh_world() -> World:
    """World with the same joint names as ``world`` at rest and no props."""
    return World(joints=[JointNode(name="hips"), JointNode(name="head"), JointNode(name="l_elbow")])


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def outline_hook() -> CallCounter:
    return CallCounter()


@pytest.fixture
def render_hook() -> CallCounter:
    return CallCounter()


def make_context(
    world: World,
    notifier: RecordingNotifier | None = None,
    outline_hook: CallCounter | None = None,
    render_hook: CallCounter | None = None,
) -> PoseContext:
    """Fully wired in-memory context around ``world``."""
    scene = InMemoryScene()
    for prop in world.props:
        scene.add(prop)
    return PoseContext(
        world=world,
        scene=scene,
        prop_factory=DefaultPropFactory(world, scene),
        notes=TextNotes(),
        notify=notifier,
        refresh_outline=outline_hook,
        force_render=render_hook,
        reset_joints=world.reset_joint_rotations,
    )


@pytest.fixture
def context(
    fresh_world: World,
    notifier: RecordingNotifier,
    outline_hook: CallCounter,
    render_hook: CallCounter,
) -> PoseContext:
    """Context around ``fresh_world`` with recording hooks."""
    return make_context(fresh_world, notifier, outline_hook, render_hook)


@pytest.fixture
def rig_context(notifier: RecordingNotifier) -> PoseContext:
    """Headless context around the standard character rig."""
    return PoseContext.headless(build_default_rig(), notify=notifier)
