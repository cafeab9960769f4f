"""Multi-file pose pack import.

Files are processed strictly one after another: each pose is applied to the
single shared world before it is handed to the gallery, so a thumbnail the
gallery captures shows exactly that pose.

A bad file never aborts the batch; it is logged and skipped.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
import json
import logging
from pathlib import Path
import re
from typing import Any

import aiofiles  # type: ignore[import-untyped]

from posesandbox.core.poses.applier import apply_pose
from posesandbox.core.poses.models import PoseDocument
from posesandbox.core.utils.logging import get_logger
from posesandbox.core.world.context import PoseContext
from posesandbox.core.world.protocols import GallerySaveHook, Hook, Notifier, PoseFile

logger = logging.getLogger(__name__)

NO_POSES_IMPORTED_MESSAGE = "No valid poses imported"

_JSON_SUFFIX = re.compile(r"\.json$", re.IGNORECASE)


def is_pose_file_name(name: str | None) -> bool:
    """True when the file name ends in ``.json`` (any case)."""
    if not name:
        return False
    return name.lower().endswith(".json")


def display_name(file_name: str) -> str:
    """Gallery display name: the file name without its ``.json`` suffix."""
    return _JSON_SUFFIX.sub("", file_name)


def import_summary(imported: int) -> str:
    if imported == 0:
        return NO_POSES_IMPORTED_MESSAGE
    return f"Imported {imported} pose{'s' if imported > 1 else ''}"


class LocalPoseFile:
    """PoseFile backed by a path on the local filesystem."""

    def __init__(self, path: Path | str, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @property
    def name(self) -> str:
        return self.path.name

    async def read_text(self) -> str:
        async with aiofiles.open(self.path, encoding=self.encoding) as f:
            content: str = await f.read()
            return content

    def __repr__(self) -> str:
        return f"LocalPoseFile({str(self.path)!r})"


@dataclass
class ImportHooks:
    """Collaborators used by :func:`import_pose_pack`.

    Attributes:
        apply_pose: Applies one decoded document to the live world
        save_to_gallery: Persists the current world under a name
        render_gallery: Re-renders the gallery once after the batch
        notify: Toast callback for the single summary message
    """

    apply_pose: Callable[[Any], None] | None = None
    save_to_gallery: GallerySaveHook | None = None
    render_gallery: Hook | None = None
    notify: Notifier | None = None

    @classmethod
    def for_context(
        cls,
        context: PoseContext,
        *,
        save_to_gallery: GallerySaveHook | None = None,
        render_gallery: Hook | None = None,
    ) -> ImportHooks:
        """Bind the full applier to a context.

        Per-pose "Pose loaded" toasts are suppressed; the batch emits one
        summary through ``context.notify`` instead.
        """
        quiet = replace(context, notify=None)
        return cls(
            apply_pose=lambda data: apply_pose(data, quiet),
            save_to_gallery=save_to_gallery,
            render_gallery=render_gallery,
            notify=context.notify,
        )


async def _import_one(pose_file: PoseFile, hooks: ImportHooks) -> None:
    text = await pose_file.read_text()
    data = json.loads(text)

    if hooks.apply_pose is not None:
        hooks.apply_pose(data)
    else:
        # Still reject files that are not pose documents.
        PoseDocument.parse(data)

    if hooks.save_to_gallery is not None:
        hooks.save_to_gallery(name=display_name(pose_file.name), with_toast=False)


async def import_pose_pack(files: Iterable[PoseFile] | None, hooks: ImportHooks) -> int:
    """Import a batch of pose JSON files.

    Non-``.json`` names are skipped without being counted. Read, parse and
    apply failures are logged and the file is skipped; the batch always runs to
    the end.

    Args:
        files: Ordered file handles
        hooks: Apply/gallery/notification collaborators

    Returns:
        Number of files imported successfully

    Example:
        >>> hooks = ImportHooks.for_context(context, save_to_gallery=gallery.save)
        >>> count = await import_pose_pack([LocalPoseFile("a.json")], hooks)
    """
    candidates = list(files or [])
    if not candidates:
        return 0

    pose_files: list[PoseFile] = []
    for candidate in candidates:
        name = getattr(candidate, "name", None)
        if is_pose_file_name(name):
            pose_files.append(candidate)
        else:
            logger.debug(f"Skipping non-JSON file: {name!r}")

    batch_logger = get_logger(__name__, batch_size=len(pose_files))
    imported = 0
    for pose_file in pose_files:
        name = pose_file.name
        try:
            await _import_one(pose_file, hooks)
        except Exception:
            batch_logger.warning(f"Failed to import pose: {name}", exc_info=True)
            continue

        imported += 1
        logger.debug(f"Imported pose {name!r}")

    if hooks.render_gallery is not None:
        hooks.render_gallery()

    logger.info(f"Pose pack import finished: {imported}/{len(pose_files)} pose files imported")

    if hooks.notify is not None:
        hooks.notify(import_summary(imported))

    return imported
