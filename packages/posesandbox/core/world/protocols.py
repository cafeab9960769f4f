"""Protocols for the collaborators the pose subsystem drives.

The renderer, UI and gallery live outside this package. Everything the
serializer, appliers and importer need from them is expressed here.
"""

from __future__ import annotations

from typing import Any, Protocol

from posesandbox.core.world.models import PropInstance


class Scene(Protocol):
    """Render scene graph that props are attached to."""

    def add(self, obj: Any) -> None:
        """Attach an object to the scene."""
        ...

    def remove(self, obj: Any) -> None:
        """Detach an object from the scene. Unknown objects are ignored."""
        ...


class PropFactory(Protocol):
    """Creates a prop of the given type.

    Implementations append the new prop to ``world.props`` and attach it to the
    scene, then return it. Returning None means the type could not be built.
    """

    def __call__(self, prop_type: str) -> PropInstance | None: ...


class NotesSink(Protocol):
    """Object exposing a mutable free-text ``value`` (a textarea in the app)."""

    value: str


class Notifier(Protocol):
    """Transient user notification (toast)."""

    def __call__(self, message: str, duration_ms: int | None = None) -> None: ...


class Hook(Protocol):
    """Argument-less callback (outline refresh, forced render, joint reset)."""

    def __call__(self) -> None: ...


class GallerySaveHook(Protocol):
    """Persists the current world state under a display name."""

    def __call__(self, *, name: str, with_toast: bool) -> None: ...


class PoseFile(Protocol):
    """File-like handle accepted by the import pipeline."""

    @property
    def name(self) -> str:
        """File name including extension."""
        ...

    async def read_text(self) -> str:
        """Read the whole file as text.

        Raises:
            OSError: On read failure
        """
        ...
