#===============================================================================
#  Lunaro | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Load/save of the launcher config (~/lunaroconf/config): where AppImages
#  live, where launch logs go, and which GPU is the default.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple, cast

from .constants import (
    APP_LOG_FILE_NAME,
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_APPIMAGE_DIR,
    DEFAULT_GPU,
    DEFAULT_LOG_DIR,
    FAVORITES_FILE_NAME,
    GPU_CHOICES,
    KEY_APPIMAGE_DIR,
    KEY_DEFAULT_GPU,
    KEY_LOG_DIR,
)
from .models import GpuChoice

log = logging.getLogger(__name__)

CONFIG_LINE_RE = re.compile(r"^(?:export\s+)?([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$")

DEFAULT_CONFIG_TEXT = f"""\
# Lunaro Configuration File
# Edit these values to customize your setup

# Directory where AppImages are stored
{KEY_APPIMAGE_DIR}={DEFAULT_APPIMAGE_DIR}

# Directory where logs are saved
{KEY_LOG_DIR}={DEFAULT_LOG_DIR}

# Default GPU to use (dgpu or igpu)
{KEY_DEFAULT_GPU}={DEFAULT_GPU}
"""


@dataclass(frozen=True)
class LauncherPaths:
    config_dir: Path

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    @property
    def favorites_file(self) -> Path:
        return self.config_dir / FAVORITES_FILE_NAME

    @property
    def app_log_file(self) -> Path:
        return self.config_dir / APP_LOG_FILE_NAME


@dataclass(frozen=True)
class LauncherConfig:
    appimage_dir: Path
    log_dir: Path
    default_gpu: GpuChoice = DEFAULT_GPU


def default_paths(home: Optional[Path] = None) -> LauncherPaths:
    return LauncherPaths(config_dir=(home or Path.home()) / CONFIG_DIR_NAME)


def expand_path(value: str) -> Path:
    """Expand $HOME / ~ the way the shell would."""
    return Path(os.path.expanduser(os.path.expandvars(value)))


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def parse_config_text(text: str) -> Dict[str, str]:
    """KEY=value lines -> dict. Comments, blanks and junk lines are skipped."""
    values: Dict[str, str] = {}
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = CONFIG_LINE_RE.match(line)
        if not m:
            log.debug("Ignoring config line %d: %r", lineno, raw)
            continue
        values[m.group(1)] = _unquote(m.group(2))
    return values


def config_from_values(values: Dict[str, str]) -> LauncherConfig:
    gpu = values.get(KEY_DEFAULT_GPU, DEFAULT_GPU).strip().lower()
    if gpu not in GPU_CHOICES:
        log.warning("Unknown %s=%r, using %s", KEY_DEFAULT_GPU, gpu, DEFAULT_GPU)
        gpu = DEFAULT_GPU
    return LauncherConfig(
        appimage_dir=expand_path(values.get(KEY_APPIMAGE_DIR) or DEFAULT_APPIMAGE_DIR),
        log_dir=expand_path(values.get(KEY_LOG_DIR) or DEFAULT_LOG_DIR),
        default_gpu=cast(GpuChoice, gpu),
    )


def write_default_config(config_file: Path) -> None:
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(DEFAULT_CONFIG_TEXT, encoding="utf-8")


def ensure_config_file(config_file: Path) -> bool:
    """Create the default config if missing. Returns True if it was created."""
    if config_file.exists():
        return False
    write_default_config(config_file)
    log.info("Created default config at %s", config_file)
    return True


def load_config(config_file: Path) -> LauncherConfig:
    """Load config from disk (writing the defaults first if it doesn't exist)."""
    ensure_config_file(config_file)
    text = config_file.read_text(encoding="utf-8", errors="ignore")
    return config_from_values(parse_config_text(text))


def ensure_dirs(paths: LauncherPaths, config: Optional[LauncherConfig] = None) -> List[Tuple[Path, OSError]]:
    """Create the config dir, plus the app and log dirs when a config is given.

    The config dir must exist. Dirs named by the config are best effort: the
    ones that can't be created are returned with their error instead of raising.
    """
    paths.config_dir.mkdir(parents=True, exist_ok=True)
    failed: List[Tuple[Path, OSError]] = []
    if config is None:
        return failed
    for d in (config.appimage_dir, config.log_dir):
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            log.warning("Cannot create %s: %s", d, e)
            failed.append((d, e))
    return failed
