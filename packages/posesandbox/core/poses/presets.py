"""Named joint presets applied with the joints-only applier."""

from __future__ import annotations

from enum import Enum
from typing import TypeGuard

from pydantic import BaseModel, ConfigDict, Field, field_validator

from posesandbox.core.poses.models import PoseDocument
from posesandbox.core.utils.math import quaternion_from_euler


class PresetLibrary(str, Enum):
    """Standard preset identifiers.

    All enum values should have corresponding definitions in ``STANDARD_PRESETS``.
    """

    T_POSE = "t_pose"
    A_POSE = "a_pose"
    ARMS_UP = "arms_up"
    SITTING = "sitting"
    WALKING = "walking"
    WAVE = "wave"


class Preset(BaseModel):
    """Joint preset authored as Euler angles.

    Only the joints listed are set; the joints-only applier resets every other
    joint to rest first.
    """

    model_config = ConfigDict(frozen=True)

    preset_id: PresetLibrary | str = Field(
        description="Preset id (PresetLibrary for standard presets; string for custom)."
    )
    name: str = Field(description="Human-readable preset name")
    description: str = Field(default="", description="What the preset looks like")
    joints_deg: dict[str, tuple[float, float, float]] = Field(
        default_factory=dict,
        description="Joint name -> XYZ Euler rotation in degrees",
    )

    @field_validator("preset_id")
    @classmethod
    def _normalize_preset_id(cls, v: PresetLibrary | str) -> PresetLibrary | str:
        if isinstance(v, PresetLibrary):
            return v
        if not isinstance(v, str) or not v.strip():
            raise ValueError("preset_id must be a PresetLibrary or a non-empty string")
        return v.strip().upper()

    def to_document(self) -> PoseDocument:
        """Convert to a joints-only pose document."""
        return PoseDocument(
            joints={
                joint: quaternion_from_euler(*angles) for joint, angles in self.joints_deg.items()
            },
        )


class PresetConfig(BaseModel):
    """Preset configuration for AppConfig.

    Standard presets are always available; these settings override or extend them.
    """

    model_config = ConfigDict(frozen=True)

    custom_presets: dict[str, Preset] = Field(
        default_factory=dict,
        description="Custom presets (added to standard presets). Keys are preset_id strings.",
    )

    preset_overrides: dict[PresetLibrary, Preset] = Field(
        default_factory=dict,
        description="Override standard preset definitions.",
    )


def _is_preset_library_id(preset_id: PresetLibrary | str) -> TypeGuard[PresetLibrary]:
    return isinstance(preset_id, PresetLibrary)


# Arms hang along -Y at rest. The left shoulder sits on -X, so raising it
# sideways is a negative Z rotation and the right side mirrors it.
STANDARD_PRESETS: dict[PresetLibrary, Preset] = {
    PresetLibrary.T_POSE: Preset(
        preset_id=PresetLibrary.T_POSE,
        name="T-Pose",
        description="Arms straight out to the sides",
        joints_deg={"l_shoulder": (0.0, 0.0, -90.0), "r_shoulder": (0.0, 0.0, 90.0)},
    ),
    PresetLibrary.A_POSE: Preset(
        preset_id=PresetLibrary.A_POSE,
        name="A-Pose",
        description="Arms angled down at 45 degrees",
        joints_deg={"l_shoulder": (0.0, 0.0, -45.0), "r_shoulder": (0.0, 0.0, 45.0)},
    ),
    PresetLibrary.ARMS_UP: Preset(
        preset_id=PresetLibrary.ARMS_UP,
        name="Arms Up",
        description="Both arms raised overhead",
        joints_deg={"l_shoulder": (0.0, 0.0, -170.0), "r_shoulder": (0.0, 0.0, 170.0)},
    ),
    PresetLibrary.SITTING: Preset(
        preset_id=PresetLibrary.SITTING,
        name="Sitting",
        description="Thighs forward, shins down, hands on knees",
        joints_deg={
            "l_hip": (-90.0, 0.0, 0.0),
            "r_hip": (-90.0, 0.0, 0.0),
            "l_knee": (90.0, 0.0, 0.0),
            "r_knee": (90.0, 0.0, 0.0),
            "l_shoulder": (-35.0, 0.0, 0.0),
            "r_shoulder": (-35.0, 0.0, 0.0),
        },
    ),
    PresetLibrary.WALKING: Preset(
        preset_id=PresetLibrary.WALKING,
        name="Walking",
        description="Mid-stride with opposite arm swing",
        joints_deg={
            "l_hip": (-25.0, 0.0, 0.0),
            "r_hip": (20.0, 0.0, 0.0),
            "l_knee": (10.0, 0.0, 0.0),
            "r_knee": (30.0, 0.0, 0.0),
            "l_shoulder": (20.0, 0.0, 0.0),
            "r_shoulder": (-20.0, 0.0, 0.0),
            "l_elbow": (-15.0, 0.0, 0.0),
            "r_elbow": (-15.0, 0.0, 0.0),
        },
    ),
    PresetLibrary.WAVE: Preset(
        preset_id=PresetLibrary.WAVE,
        name="Wave",
        description="Right arm raised with a bent elbow",
        joints_deg={
            "r_shoulder": (0.0, 0.0, 150.0),
            "r_elbow": (0.0, 0.0, 35.0),
            "neck": (0.0, -10.0, 0.0),
        },
    ),
}


def resolve_preset(preset_id: PresetLibrary | str, config: PresetConfig | None = None) -> Preset:
    """Resolve a preset id to a concrete Preset.

    Resolution order:
      1) Standard overrides (PresetLibrary only)
      2) Standard definitions (PresetLibrary only)
      3) Custom presets (string keys, case-insensitive)

    Plain strings matching a standard preset value (e.g. ``"t_pose"``) are
    treated as that standard preset.

    Args:
        preset_id: Standard PresetLibrary id or custom string id.
        config: Optional PresetConfig.

    Returns:
        Resolved Preset.

    Raises:
        KeyError: if preset_id cannot be resolved.
    """
    cfg = config or PresetConfig()

    if isinstance(preset_id, str) and not _is_preset_library_id(preset_id):
        try:
            preset_id = PresetLibrary(preset_id.strip().lower())
        except ValueError:
            pass

    if _is_preset_library_id(preset_id):
        if preset_id in cfg.preset_overrides:
            return cfg.preset_overrides[preset_id]
        if preset_id in STANDARD_PRESETS:
            return STANDARD_PRESETS[preset_id]

    if isinstance(preset_id, PresetLibrary):
        key = preset_id.value.upper()
    else:
        key = str(preset_id).strip().upper()
    for custom_key, custom_preset in cfg.custom_presets.items():
        if str(custom_key).strip().upper() == key:
            return custom_preset

    raise KeyError(f"Unknown preset_id: {preset_id!r}")


def all_presets(config: PresetConfig | None = None) -> dict[str, Preset]:
    """Return the merged preset dictionary (standard + overrides + custom).

    Args:
        config: Optional PresetConfig.

    Returns:
        Dict keyed by preset_id string.
    """
    cfg = config or PresetConfig()
    merged: dict[str, Preset] = {key.value: preset for key, preset in STANDARD_PRESETS.items()}

    for override_key, override_preset in cfg.preset_overrides.items():
        merged[override_key.value] = override_preset

    for custom_key, custom_preset in cfg.custom_presets.items():
        merged[str(custom_key).upper()] = custom_preset

    return merged
