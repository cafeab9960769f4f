"""Headless implementations of the scene-side collaborators.

Used by the CLI and tests in place of the browser renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any

from posesandbox.core.world.models import PropInstance, World

logger = logging.getLogger(__name__)


@dataclass
class InMemoryScene:
    """Scene that only records which objects are attached."""

    objects: list[Any] = field(default_factory=list)

    def add(self, obj: Any) -> None:
        if not self.contains(obj):
            self.objects.append(obj)

    def remove(self, obj: Any) -> None:
        # Identity, not equality: two props with equal transforms are distinct.
        for index, existing in enumerate(self.objects):
            if existing is obj:
                del self.objects[index]
                return

    def contains(self, obj: Any) -> bool:
        return any(existing is obj for existing in self.objects)


@dataclass
class TextNotes:
    """Plain notes sink holding a string value."""

    value: str = ""


class DefaultPropFactory:
    """Prop factory that creates bare props of any type.

    Every call appends exactly one prop to ``world.props`` and the scene and
    returns it. Names follow ``<type>_<NN>`` numbering per factory.
    """

    def __init__(self, world: World, scene: InMemoryScene | None = None):
        self.world = world
        self.scene = scene
        self._created = 0

    def __call__(self, prop_type: str) -> PropInstance | None:
        self._created += 1
        prop = PropInstance(type=prop_type, name=f"{prop_type}_{self._created:02d}")
        self.world.props.append(prop)
        if self.scene is not None:
            self.scene.add(prop)
        logger.debug(f"Created prop {prop.name!r} (type={prop_type!r})")
        return prop
