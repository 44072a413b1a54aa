"""Settings loaded from an optional brewtracker.yml in the working directory.

Example:

    data_file: brews/data.json
    tick_rate: 0.25
    log_file: brewtracker.log
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from brewtracker.store import DATA_FILE
from brewtracker.tui.ticker import DEFAULT_TICK_RATE


CONFIG_FILE = "brewtracker.yml"

_KNOWN_KEYS = {"data_file", "tick_rate", "log_file"}


class ConfigError(RuntimeError):
    """Raised when brewtracker.yml cannot be parsed or holds bad values."""


@dataclass(frozen=True)
class Settings:
    data_file: Path = Path(DATA_FILE)
    tick_rate: float = DEFAULT_TICK_RATE
    log_file: Optional[Path] = None


def load_settings(work_dir: Path | None = None) -> Settings:
    """Read CONFIG_FILE from work_dir (default: cwd). Missing file means defaults.

    Relative paths in the file are resolved against work_dir.
    """
    work_dir = Path.cwd() if work_dir is None else work_dir
    path = work_dir / CONFIG_FILE
    if not path.exists():
        return Settings(data_file=work_dir / DATA_FILE)

    try:
        cfg = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"{path} must contain a mapping")

    unknown = sorted(set(cfg) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{path}: unknown setting(s): {', '.join(unknown)}")

    return Settings(
        data_file=work_dir / _path(path, cfg, "data_file", DATA_FILE),
        tick_rate=_tick_rate(path, cfg.get("tick_rate", DEFAULT_TICK_RATE)),
        log_file=(
            work_dir / _path(path, cfg, "log_file", None)
            if cfg.get("log_file") is not None
            else None
        ),
    )


def _path(path: Path, cfg: dict, key: str, default: Any) -> Path:
    value = cfg.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{path}: '{key}' must be a non-empty path")
    return Path(value)


def _tick_rate(path: Path, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{path}: 'tick_rate' must be a positive number of seconds")
    return float(value)
