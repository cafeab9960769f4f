"""Tests for the posesandbox CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import shutil

import pytest
from rich.console import Console

from posesandbox.cli.main import ConsoleNotifier, build_arg_parser, main
from posesandbox.core.config import NotificationConfig
from posesandbox.core.poses.applier import PRESET_NO_MATCH_DURATION_MS
from posesandbox.core.world import STANDARD_JOINT_NAMES


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def pose_pack(fixtures_dir: Path, tmp_path: Path) -> list[str]:
    pack = tmp_path / "pack"
    shutil.copytree(fixtures_dir / "poses", pack)
    return [str(p) for p in sorted(pack.iterdir())]


class TestImportCommand:
    """Tests for ``posesandbox import``."""

    def test_imports_valid_files_into_gallery(self, pose_pack: list[str], tmp_path: Path):
        gallery = tmp_path / "out"

        rc = main(["import", *pose_pack, "--gallery", str(gallery)])

        assert rc == 0
        assert sorted(p.name for p in gallery.iterdir()) == [
            "legacy_untyped_props.json",
            "standing_with_props.json",
        ]

    def test_saved_entry_keeps_document_content(self, pose_pack: list[str], tmp_path: Path):
        gallery = tmp_path / "out"
        main(["import", *pose_pack, "--gallery", str(gallery)])

        saved = json.loads((gallery / "legacy_untyped_props.json").read_text(encoding="utf-8"))

        assert [p["type"] for p in saved["props"]] == ["sphere", "cube", "cylinder"]

    def test_nothing_imported_returns_1(self, fixtures_dir: Path, tmp_path: Path):
        rc = main(
            [
                "import",
                str(fixtures_dir / "poses" / "truncated.json"),
                "--gallery",
                str(tmp_path / "out"),
            ]
        )
        assert rc == 1

    def test_gallery_dir_from_config(self, pose_pack: list[str], isolated_cwd: Path):
        config = isolated_cwd / "app.json"
        config.write_text('{"gallery_dir": "from_config"}', encoding="utf-8")

        assert main(["--config", str(config), "import", *pose_pack]) == 0
        assert len(list((isolated_cwd / "from_config").glob("*.json"))) == 2


class TestInspectCommand:
    """Tests for ``posesandbox inspect``."""

    def test_valid_file(self, fixtures_dir: Path, capsys: pytest.CaptureFixture[str]):
        rc = main(["inspect", str(fixtures_dir / "poses" / "standing_with_props.json")])

        assert rc == 0
        out = capsys.readouterr().out
        assert "sphere" in out
        assert "4 (3 rotated)" in out

    def test_invalid_file(self, fixtures_dir: Path):
        assert main(["inspect", str(fixtures_dir / "poses" / "truncated.json")]) == 1

    def test_missing_file(self, tmp_path: Path):
        assert main(["inspect", str(tmp_path / "missing.json")]) == 1


class TestPresetCommands:
    """Tests for ``posesandbox preset`` and ``posesandbox presets``."""

    def test_preset_written_to_file(self, tmp_path: Path):
        out = tmp_path / "t.json"

        assert main(["preset", "t_pose", "--out", str(out)]) == 0

        doc = json.loads(out.read_text(encoding="utf-8"))
        assert list(doc["joints"]) == list(STANDARD_JOINT_NAMES)
        assert doc["props"] == []
        assert doc["notes"] == "Arms straight out to the sides"
        assert doc["version"] == 1
        assert "savedAt" in doc

    def test_unknown_preset(self):
        assert main(["preset", "moonwalk"]) == 1

    def test_presets_lists_standard(self, capsys: pytest.CaptureFixture[str]):
        assert main(["presets"]) == 0
        assert "t_pose" in capsys.readouterr().out


def test_subcommand_required():
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args([])


def test_console_notifier_records_messages(capsys: pytest.CaptureFixture[str]):
    notifier = ConsoleNotifier(Console())
    notifier("Pose loaded")

    assert notifier.messages == ["Pose loaded"]
    assert "Pose loaded" in capsys.readouterr().out


def test_console_notifier_duration_fallback():
    notifier = ConsoleNotifier(Console(), NotificationConfig(default_duration_ms=900))
    notifier("Saved Hero")
    notifier("Preset loaded (no matching joints)", PRESET_NO_MATCH_DURATION_MS)

    assert notifier.durations == [900, PRESET_NO_MATCH_DURATION_MS]
