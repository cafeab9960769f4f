"""Directory-backed pose gallery.

Each entry is one pose document stored as ``<root>/<name>.json``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
import re
import tempfile

from posesandbox.core.poses.models import PoseDocument
from posesandbox.core.poses.serializer import serialize_pose
from posesandbox.core.world.models import World
from posesandbox.core.world.protocols import NotesSink, Notifier

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^\w\-. ]+")


def sanitize_entry_name(name: str) -> str:
    """Make a display name safe to use as a file stem.

    Raises:
        ValueError: If nothing usable remains
    """
    cleaned = _UNSAFE_CHARS.sub("_", name).strip(" .")
    if not cleaned:
        raise ValueError(f"Invalid gallery entry name: {name!r}")
    return cleaned


class DirectoryGallery:
    """Gallery store writing serialized poses into a directory.

    ``save`` matches the GallerySaveHook contract, so it can be passed straight
    to the import pipeline.
    """

    def __init__(
        self,
        world: World,
        root: Path | str,
        *,
        notes: NotesSink | None = None,
        notify: Notifier | None = None,
    ):
        self.world = world
        self.root = Path(root)
        self.notes = notes
        self.notify = notify

    def _entry_path(self, name: str) -> Path:
        return self.root / f"{sanitize_entry_name(name)}.json"

    def save(self, *, name: str, with_toast: bool = True) -> Path:
        """Serialize the current world and store it under ``name``.

        Existing entries with the same name are replaced. The write goes through
        a temp file and ``os.replace`` so a crash never leaves a partial entry.

        Args:
            name: Display name of the entry
            with_toast: Emit a "Saved" notification

        Returns:
            Path of the written entry
        """
        document = serialize_pose(self.world, self.notes)
        path = self._entry_path(name)
        self.root.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self.root, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(document.to_json())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(f"Saved gallery entry {name!r} -> {path}")
        if with_toast and self.notify is not None:
            self.notify(f"Saved {name}")
        return path

    def list_names(self) -> list[str]:
        """Sorted entry names (file stems)."""
        if not self.root.is_dir():
            return []
        return sorted(p.stem for p in self.root.glob("*.json"))

    def load(self, name: str) -> PoseDocument:
        """Read a stored entry.

        Raises:
            FileNotFoundError: If no entry has that name
            InvalidPoseError: If the stored file is not a pose document
        """
        path = self._entry_path(name)
        if not path.exists():
            raise FileNotFoundError(f"Gallery entry does not exist: {name}")
        return PoseDocument.parse_json(path.read_text(encoding="utf-8"))
