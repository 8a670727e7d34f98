"""Explicit configuration for lip-core operations."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = Path("config") / "config.toml"
DEFAULT_GOPROXY_URL = "https://goproxy.io"
DEFAULT_TIMEOUT_SECONDS = 10.0
GOPROXY_ENV = "LIP_GOPROXY"


@dataclass(frozen=True)
class LipConfig:
    metadata_dir: Path
    goproxy_url: str = DEFAULT_GOPROXY_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def _load_lip_section(workspace_root: Path) -> dict[str, Any]:
    config_path = workspace_root / CONFIG_RELATIVE_PATH
    if not config_path.exists():
        return {}
    try:
        payload = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        logger.warning("config unreadable path=%s err=%s; using defaults", config_path, exc)
        return {}
    section = payload.get("lip")
    return section if isinstance(section, dict) else {}


def load_config(workspace_root: Path) -> LipConfig:
    """Build a ``LipConfig`` from ``<workspace>/config/config.toml``.

    Reads the ``[lip]`` table. ``metadata_dir`` defaults to
    ``<workspace>/metadata`` and relative values resolve against the workspace.
    ``LIP_GOPROXY`` in the environment overrides ``goproxy_url``.
    """
    workspace_root = workspace_root.resolve()
    section = _load_lip_section(workspace_root)

    metadata_dir = Path(str(section.get("metadata_dir") or "metadata"))
    if not metadata_dir.is_absolute():
        metadata_dir = workspace_root / metadata_dir

    goproxy_url = str(section.get("goproxy_url") or DEFAULT_GOPROXY_URL).strip()
    env_proxy = os.getenv(GOPROXY_ENV, "").strip()
    if env_proxy:
        goproxy_url = env_proxy

    raw_timeout = section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    try:
        timeout_seconds = float(raw_timeout)
    except (TypeError, ValueError):
        logger.warning("config invalid timeout_seconds=%r; using default", raw_timeout)
        timeout_seconds = DEFAULT_TIMEOUT_SECONDS

    return LipConfig(
        metadata_dir=metadata_dir,
        goproxy_url=goproxy_url,
        timeout_seconds=timeout_seconds,
    )
