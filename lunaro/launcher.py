#===============================================================================
#  Lunaro | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Launches a resolved AppImage as a detached background process with the GPU
#  environment, optional log file and optional root elevation.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import signal
import stat
import subprocess
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence

from .constants import ELEVATION_COMMAND, LOG_TIMESTAMP_FORMAT, NO_SANDBOX_ARG
from .env_manager import build_child_env
from .fs_discovery import logical_name
from .models import LaunchPolicy, LaunchResult, LaunchStatus

log = logging.getLogger(__name__)

# (path, args) -> argv actually executed
ElevationStrategy = Callable[[Path, Sequence[str]], List[str]]

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH

# Ctrl+C / Ctrl+\ at the prompt and closing the terminal
DETACHED_IGNORED_SIGNALS = (signal.SIGINT, signal.SIGQUIT, signal.SIGHUP)


def sudo_elevation(path: Path, args: Sequence[str]) -> List[str]:
    return [*ELEVATION_COMMAND, str(path), *args]


def ignore_terminal_signals() -> None:
    """Runs in the child before exec: what `nohup cmd &` does in sh."""
    for sig in DETACHED_IGNORED_SIGNALS:
        signal.signal(sig, signal.SIG_IGN)


def ensure_executable(path: Path) -> None:
    """chmod +x if needed. Raises OSError when the filesystem refuses."""
    if os.access(path, os.X_OK):
        return
    mode = path.stat().st_mode
    path.chmod(mode | EXEC_BITS)
    log.info("Marked executable: %s", path)


def build_log_path(log_dir: Path, artifact_path: Path, now: Optional[datetime] = None) -> Path:
    name = logical_name(artifact_path) or artifact_path.name
    stamp = (now or datetime.now()).strftime(LOG_TIMESTAMP_FORMAT)
    return log_dir / f"{name}_{stamp}.log"


def build_command(path: Path, policy: LaunchPolicy, elevation: ElevationStrategy = sudo_elevation) -> List[str]:
    if policy.elevated:
        return elevation(path, [NO_SANDBOX_ARG])
    return [str(path)]


def launch_app(
    path: Path,
    policy: LaunchPolicy,
    log_dir: Path,
    elevation: ElevationStrategy = sudo_elevation,
    environ: Optional[Mapping[str, str]] = None,
    now: Optional[datetime] = None,
    on_log_file: Optional[Callable[[Path], None]] = None,
) -> LaunchResult:
    """Start the AppImage and return immediately (the child is never waited on).

    `on_log_file` is called with the log path right before the spawn.
    Success only means the start request was issued.
    """
    display = path.name
    gpu_label = policy.gpu_mode.label

    try:
        ensure_executable(path)
    except OSError as e:
        log.warning("Cannot make executable %s: %s", path, e)
        return LaunchResult(LaunchStatus.PERMISSION_DENIED, name=display, error=str(path))

    log_file = build_log_path(log_dir, path, now) if policy.logging else None
    cmd = build_command(path, policy, elevation)
    env = build_child_env(policy.gpu_mode, environ)
    if log_file is not None and on_log_file is not None:
        on_log_file(log_file)

    try:
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            sink = open(log_file, "ab")
        else:
            sink = open(os.devnull, "wb")
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=sink,
                stderr=subprocess.STDOUT,
                env=env,
                close_fds=True,
                # sudo needs the controlling terminal to ask for a password,
                # so elevated children stay in our session but ignore its signals
                start_new_session=not policy.elevated,
                preexec_fn=ignore_terminal_signals if policy.elevated else None,
            )
        finally:
            # the child holds its own copy of the descriptor
            sink.close()
    except OSError as e:
        log.error("Failed to start %s: %s", cmd, e)
        return LaunchResult(
            LaunchStatus.LAUNCH_FAILED,
            name=display,
            gpu_label=gpu_label,
            elevated=policy.elevated,
            log_file=log_file,
            error=str(e),
        )

    log.info(
        "Launched %s pid=%s gpu=%s elevated=%s log=%s",
        display, proc.pid, gpu_label, policy.elevated, log_file,
    )
    return LaunchResult(
        LaunchStatus.LAUNCHED,
        name=display,
        gpu_label=gpu_label,
        elevated=policy.elevated,
        log_file=log_file,
        process=proc,
    )
