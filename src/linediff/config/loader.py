"""Load and merge configuration from .linediff.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from linediff.config.defaults import CONFIG_FILENAME
from linediff.config.schema import (
    FORMAT_CHOICES,
    MERGE_CHOICES,
    DiffConfig,
    LineDiffConfig,
    OutputConfig,
)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(project_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = project_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: LineDiffConfig, source: Path) -> None:
    ctx = cfg.diff.context_lines
    if not isinstance(ctx, int) or isinstance(ctx, bool) or ctx < 0:
        raise ConfigError(f"{source}: diff.context_lines must be a non-negative integer")
    if cfg.diff.merge not in MERGE_CHOICES:
        raise ConfigError(f"{source}: diff.merge must be one of {', '.join(MERGE_CHOICES)}")
    if cfg.output.format not in FORMAT_CHOICES:
        raise ConfigError(f"{source}: output.format must be one of {', '.join(FORMAT_CHOICES)}")


def _merge_env_overrides(cfg: LineDiffConfig) -> None:
    """Apply LINEDIFF_* environment variable overrides; bad values are ignored."""
    if val := os.environ.get("LINEDIFF_CONTEXT"):
        try:
            ctx = int(val)
        except ValueError:
            ctx = -1
        if ctx >= 0:
            cfg.diff.context_lines = ctx
    if val := os.environ.get("LINEDIFF_MERGE"):
        if val in MERGE_CHOICES:
            cfg.diff.merge = val  # type: ignore[assignment]
    if val := os.environ.get("LINEDIFF_FORMAT"):
        if val in FORMAT_CHOICES:
            cfg.output.format = val  # type: ignore[assignment]
    if os.environ.get("NO_COLOR"):
        cfg.output.color = False


def load_config(
    project_dir: Path,
    config_override: Optional[str] = None,
) -> LineDiffConfig:
    """Load, validate, and return a LineDiffConfig."""
    config_path = find_config_file(project_dir, config_override)

    if config_path is None:
        cfg = LineDiffConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = LineDiffConfig(
                version=raw.get("version", "1.0"),
                diff=_build_section(raw, DiffConfig, "diff"),
                output=_build_section(raw, OutputConfig, "output"),
            )
        except (AttributeError, TypeError) as exc:
            raise ConfigError(f"Invalid config in {config_path}: {exc}") from exc
        _validate(cfg, config_path)

    _merge_env_overrides(cfg)
    return cfg
