#===============================================================================
#  Lunaro | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Shared data models used across the launcher (artifacts, parsed commands,
#  launch policy and launch outcome).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Literal, Optional

# value of DEFAULT_GPU in the config file
GpuChoice = Literal["dgpu", "igpu"]


class GpuMode(str, Enum):
    INTEGRATED = "integrated"
    DEDICATED = "dedicated"

    @property
    def label(self) -> str:
        return "iGPU" if self is GpuMode.INTEGRATED else "dGPU"


class LaunchStatus(str, Enum):
    LAUNCHED = "launched"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    LAUNCH_FAILED = "launch_failed"


@dataclass(frozen=True)
class Artifact:
    """An AppImage discovered in the app directory."""
    name: str   # logical name: filename without the suffix, original case
    path: Path

    @property
    def filename(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class ParsedCommand:
    name: str
    flags: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class LaunchPolicy:
    gpu_mode: GpuMode = GpuMode.DEDICATED
    logging: bool = False
    elevated: bool = False


@dataclass
class LaunchResult:
    status: LaunchStatus
    name: str                             # what the user asked for, or the artifact filename
    gpu_label: str = ""
    elevated: bool = False
    log_file: Optional[Path] = None
    process: Optional[subprocess.Popen] = field(default=None, repr=False)
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status is LaunchStatus.LAUNCHED

    @property
    def pid(self) -> Optional[int]:
        return self.process.pid if self.process is not None else None
