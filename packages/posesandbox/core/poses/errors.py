"""Exceptions raised by pose serialization and application."""

from __future__ import annotations


class PoseError(Exception):
    """Base exception for all pose subsystem errors."""


class MissingWorldError(PoseError):
    """Raised when no world (or no joint/prop collection) is supplied."""


class MissingSceneError(PoseError):
    """Raised when a full apply is attempted without a scene."""


class InvalidPoseError(PoseError):
    """Raised when a pose document is not a structured value or cannot be coerced."""


class InvalidPresetError(PoseError):
    """Raised when a preset document carries no joints mapping."""
