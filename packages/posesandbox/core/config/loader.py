"""Load PoseSandbox settings from JSON or YAML files."""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from posesandbox.core.config.models import AppConfig
from posesandbox.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

_FORMATS_BY_SUFFIX = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def detect_format(file_path: Path | str) -> str:
    """Map a config file extension to ``"json"`` or ``"yaml"``.

    Raises:
        ValueError: For any other extension

    Example:
        >>> detect_format("posesandbox.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()
    try:
        return _FORMATS_BY_SUFFIX[suffix]
    except KeyError:
        raise ValueError(f"Unsupported config format: {suffix or '<none>'}") from None


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e


def _parse_yaml(text: str) -> Any:
    try:
        content = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e
    # An empty document means "all defaults"
    return {} if content is None else content


_PARSERS: dict[str, Callable[[str], Any]] = {"json": _parse_json, "yaml": _parse_yaml}


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a config file into a plain mapping.

    Args:
        path: ``.json``, ``.yaml`` or ``.yml`` file

    Returns:
        Top-level mapping (empty for an empty YAML file)

    Raises:
        FileNotFoundError: If the file is missing
        ValueError: On an unknown extension, unparsable content, or a
            top-level value that is not a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    parse = _PARSERS[detect_format(path)]
    try:
        content = parse(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise ValueError(f"{e} ({path})") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Build the validated AppConfig.

    Without ``path`` the default ``posesandbox.yaml`` in the working directory
    is tried. A missing file is not an error; it yields the defaults.

    Raises:
        ValidationError: If the file contains unknown keys or bad values
    """
    path = Path(path) if path is not None else AppConfig.default_path()

    if not path.exists():
        logger.debug(f"No config at {path}; using defaults")
        return AppConfig()

    logger.debug(f"Loading app config from {path}")
    return AppConfig.model_validate(load_config(path))


def configure_logging(config: AppConfig | None = None) -> None:
    """Apply ``config.logging`` (default config when None) to the root logger."""
    settings = (config or load_app_config()).logging
    _configure_logging(
        level=settings.level,
        format_string=settings.format,
        filename=settings.filename,
        structured=settings.structured,
    )
