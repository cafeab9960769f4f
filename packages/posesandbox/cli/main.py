"""Command-line interface for PoseSandbox.

Runs the pose subsystem headlessly against the standard character rig.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.table import Table

from posesandbox.core.config.loader import configure_logging, load_app_config
from posesandbox.core.config.models import AppConfig, NotificationConfig
from posesandbox.core.gallery import DirectoryGallery
from posesandbox.core.poses import (
    ImportHooks,
    LocalPoseFile,
    PoseDocument,
    PoseError,
    all_presets,
    apply_pose_joints_only,
    import_pose_pack,
    resolve_preset,
    serialize_pose,
)
from posesandbox.core.utils.math import is_identity
from posesandbox.core.world import PoseContext

console = Console()
logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """Notifier printing toasts to the console."""

    def __init__(self, out: Console, config: NotificationConfig | None = None):
        self.out = out
        self.config = config or NotificationConfig()
        self.messages: list[str] = []
        self.durations: list[int] = []

    def __call__(self, message: str, duration_ms: int | None = None) -> None:
        duration = duration_ms or self.config.default_duration_ms
        logger.debug(f"Toast ({duration}ms): {message}")
        self.messages.append(message)
        self.durations.append(duration)
        self.out.print(f"[cyan]» {message}[/cyan]")


def _load_config(path: str | None) -> AppConfig:
    config = load_app_config(path)
    configure_logging(config)
    return config


def cmd_import(args: argparse.Namespace) -> int:
    """Import pose files into a directory gallery."""
    config = _load_config(args.config)
    gallery_dir = Path(args.gallery or config.gallery_dir).resolve()

    notifier = ConsoleNotifier(console, config.notifications)
    context = PoseContext.headless(notify=notifier)
    assert context.world is not None
    gallery = DirectoryGallery(context.world, gallery_dir, notes=context.notes, notify=notifier)

    hooks = ImportHooks.for_context(context, save_to_gallery=gallery.save)
    files = [LocalPoseFile(path) for path in args.files]

    console.print(f"[bold]Importing {len(files)} file(s) into[/bold] {gallery_dir}")
    imported = asyncio.run(import_pose_pack(files, hooks))

    for name in gallery.list_names():
        console.print(f"   - {name}")

    return 0 if imported > 0 else 1


def _rotated_joint_count(document: PoseDocument) -> int:
    quaternions = (document.quaternion_for(name) for name in document.joints or {})
    return sum(1 for q in quaternions if q is not None and not is_identity(q))


def cmd_inspect(args: argparse.Namespace) -> int:
    """Print a summary of a pose document."""
    path = Path(args.file)
    if not path.exists():
        console.print(f"[red]ERROR: File not found: {path}[/red]")
        return 1

    try:
        document = PoseDocument.parse_json(path.read_text(encoding="utf-8"))
    except (ValueError, PoseError) as e:
        console.print(f"[red]ERROR: {path.name} is not a valid pose: {e}[/red]")
        return 1

    table = Table(title=path.name)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("version", str(document.version))
    table.add_row("savedAt", document.saved_at or "-")
    table.add_row(
        "joints",
        f"{len(document.joints or {})} ({_rotated_joint_count(document)} rotated)",
    )
    table.add_row(
        "props",
        ", ".join(p.resolved_type for p in document.props or ()) or "-",
    )
    table.add_row("notes", document.notes or "-")
    console.print(table)
    return 0


def cmd_preset(args: argparse.Namespace) -> int:
    """Apply a preset to a fresh rig and emit the resulting pose."""
    config = _load_config(args.config)
    try:
        preset = resolve_preset(args.name, config.presets)
    except KeyError:
        console.print(f"[red]ERROR: Unknown preset: {args.name}[/red]")
        return 1

    notifier = ConsoleNotifier(console, config.notifications)
    context = PoseContext.headless(notify=notifier)
    apply_pose_joints_only(preset.to_document(), context)

    output = serialize_pose(context.world, preset.description).to_json()
    if args.out:
        Path(args.out).write_text(output, encoding="utf-8")
        console.print(f"[green]Wrote[/green] {args.out}")
    else:
        console.print_json(output)
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    """List available presets."""
    config = _load_config(args.config)
    table = Table(title="Presets")
    table.add_column("Id", style="bold")
    table.add_column("Name")
    table.add_column("Joints", justify="right")
    for preset_id, preset in all_presets(config.presets).items():
        table.add_row(preset_id, preset.name, str(len(preset.joints_deg)))
    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="posesandbox",
        description="PoseSandbox - pose document tools",
    )
    p.add_argument("--config", default=None, help="Path to app config (JSON or YAML)")
    sub = p.add_subparsers(dest="cmd", required=True)

    imp = sub.add_parser("import", help="Import pose JSON files into a gallery")
    imp.add_argument("files", nargs="+", help="Pose files (non-.json names are skipped)")
    imp.add_argument("--gallery", default=None, help="Gallery directory (default from config)")
    imp.set_defaults(func=cmd_import)

    inspect = sub.add_parser("inspect", help="Summarize a pose file")
    inspect.add_argument("file", help="Pose JSON file")
    inspect.set_defaults(func=cmd_inspect)

    preset = sub.add_parser("preset", help="Render a preset as a pose document")
    preset.add_argument("name", help="Preset id (e.g. t_pose)")
    preset.add_argument("--out", default=None, help="Write JSON here instead of stdout")
    preset.set_defaults(func=cmd_preset)

    presets = sub.add_parser("presets", help="List available presets")
    presets.set_defaults(func=cmd_presets)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
