"""Load and merge configuration from .gitdelta.toml and env vars."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitdelta.config.schema import (
    COLOR_MODES,
    SECTION_STYLES,
    DeltaConfig,
    OutputConfig,
    SectionsConfig,
    SectionStyle,
    ThemeConfig,
)
from gitdelta.output.syntax import list_themes

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".gitdelta.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(search_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence, then *search_dir*, then home."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    for candidate in (search_dir / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME):
        if candidate.is_file():
            return candidate
    return None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: DeltaConfig) -> None:
    """Apply GITDELTA_* environment variable overrides. Invalid values are ignored."""
    for attr in ("commit_style", "file_style", "hunk_style"):
        var = f"GITDELTA_{attr.upper()}"
        if val := os.environ.get(var):
            if val in SECTION_STYLES:
                setattr(cfg.sections, attr, SectionStyle(val))
            else:
                logger.info("Ignoring %s=%r: not a section style", var, val)
    if val := os.environ.get("GITDELTA_WIDTH"):
        try:
            width = int(val)
        except ValueError:
            width = 0
        if width > 0:
            cfg.output.width = width
        else:
            logger.info("Ignoring GITDELTA_WIDTH=%r: not a positive integer", val)
    if val := os.environ.get("GITDELTA_THEME"):
        cfg.theme.theme = val
    if val := os.environ.get("GITDELTA_COLOR"):
        if val in COLOR_MODES:
            cfg.output.color = val  # type: ignore[assignment]
        else:
            logger.info("Ignoring GITDELTA_COLOR=%r", val)


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    import dataclasses

    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    try:
        return cls(**filtered)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid [{section}] section: {exc}") from exc


def load_config(
    search_dir: Path,
    config_override: Optional[str] = None,
) -> DeltaConfig:
    """Load, validate, and return a DeltaConfig."""
    config_path = find_config_file(search_dir, config_override)

    if config_path is None:
        cfg = DeltaConfig()
    else:
        logger.info("Using config file %s", config_path)
        raw = _parse_toml(config_path)
        cfg = DeltaConfig(
            sections=_build_section(raw, SectionsConfig, "sections"),
            output=_build_section(raw, OutputConfig, "output"),
            theme=_build_section(raw, ThemeConfig, "theme"),
        )

    _merge_env_overrides(cfg)
    if cfg.theme.theme not in list_themes():
        logger.warning("Unknown theme %r, falling back to the default colours", cfg.theme.theme)
    return cfg
