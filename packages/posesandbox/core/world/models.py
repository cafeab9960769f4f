"""Live world state: posable joints and freestanding props.

These are mutable runtime objects (not documents). Identity matters: the scene
tracks the same instances the world holds, so equality is by identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from posesandbox.core.utils.math import (
    IDENTITY_QUATERNION,
    UNIT_SCALE,
    ZERO_VECTOR,
    Quaternion,
    Vector3,
)


@dataclass(eq=False)
class JointNode:
    """Named orientable pivot in the character hierarchy.

    Only the local orientation is posable; position and parenting are fixed
    when the rig is built.
    """

    name: str
    quaternion: Quaternion = IDENTITY_QUATERNION

    def reset_rotation(self) -> None:
        self.quaternion = IDENTITY_QUATERNION


@dataclass(eq=False)
class PropInstance:
    """Freestanding object placed independently of the joint hierarchy.

    Attributes:
        type: Stored shape type tag (None for props created before tagging)
        name: Display name, may be empty
        position: World position
        quaternion: Orientation (x, y, z, w)
        scale: Per-axis scale
        is_pose_prop: True when the prop was rebuilt from a pose document
    """

    type: str | None = None
    name: str = ""
    position: Vector3 = ZERO_VECTOR
    quaternion: Quaternion = IDENTITY_QUATERNION
    scale: Vector3 = UNIT_SCALE
    is_pose_prop: bool = False


@dataclass
class World:
    """The shared mutable world a pose is captured from and applied to.

    Attributes:
        joints: Ordered joint list (built once per session)
        props: Ordered prop list (rebuilt on every full apply)
    """

    joints: list[JointNode] = field(default_factory=list)
    props: list[PropInstance] = field(default_factory=list)

    def joint_map(self) -> dict[str, JointNode]:
        """Ordered name -> joint map. Duplicate names: the last joint wins."""
        return {joint.name: joint for joint in self.joints}

    def reset_joint_rotations(self) -> None:
        """Set every joint to identity orientation."""
        for joint in self.joints:
            joint.reset_rotation()
