"""Standard character joint layout.

Only joint names matter to pose documents. Mesh geometry and joint offsets
belong to the renderer and are not modelled here.
"""

from __future__ import annotations

from posesandbox.core.world.models import JointNode, World

# Build order of the box character (parents before children).
STANDARD_JOINT_NAMES: tuple[str, ...] = (
    "char_root",
    "hips",
    "chest",
    "neck",
    "l_shoulder",
    "r_shoulder",
    "l_elbow",
    "r_elbow",
    "l_wrist",
    "r_wrist",
    "l_hip",
    "r_hip",
    "l_knee",
    "r_knee",
    "l_ankle",
    "r_ankle",
)


def build_default_rig(joint_names: tuple[str, ...] = STANDARD_JOINT_NAMES) -> World:
    """Create a world holding the standard character at rest.

    Args:
        joint_names: Joint names to create, in build order

    Returns:
        World with identity-oriented joints and no props
    """
    return World(joints=[JointNode(name=name) for name in joint_names])
