#===============================================================================
#  Lunaro | repl.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Interactive prompt: bootstraps config/favorites into a Session, reads one
#  line at a time and dispatches it to help/list/fav/unfav or to the launch
#  pipeline (parse -> resolve -> policy -> launch).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from .config import LauncherConfig, LauncherPaths, default_paths, ensure_config_file, ensure_dirs, load_config
from .constants import APP_TITLE, PROMPT
from .display import (
    EASTER_EGG,
    plain,
    render_banner,
    render_error,
    render_help,
    render_launch_result,
    render_listing,
    render_logging_to,
    render_usage,
)
from .favorites import FavoriteSet
from .flags import parse_command, resolve_policy, unknown_flags
from .fs_discovery import find_artifact, scan_artifacts
from .launcher import ElevationStrategy, launch_app, sudo_elevation
from .logging_setup import setup_logging
from .models import LaunchResult, LaunchStatus

log = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "quit"}


@dataclass
class Session:
    """Process-wide state handed to every command handler."""
    paths: LauncherPaths
    config: LauncherConfig
    favorites: FavoriteSet
    console: Console = field(default_factory=Console)
    elevation: ElevationStrategy = sudo_elevation


def bootstrap(
    home: Optional[Path] = None,
    console: Optional[Console] = None,
    configure_logging: bool = True,
) -> Session:
    """Create dirs/config/favorites as needed and load them."""
    console = console or Console()
    paths = default_paths(home)
    ensure_dirs(paths)
    if configure_logging:
        setup_logging(paths.app_log_file)

    if ensure_config_file(paths.config_file):
        plain(console, f"Created default config at: {paths.config_file}")

    config = load_config(paths.config_file)
    # config may point somewhere new; a bad path must not block startup
    for d, e in ensure_dirs(paths, config):
        render_error(console, f"Cannot create directory {d}: {e.strerror or e}")
    favorites = FavoriteSet.load(paths.favorites_file)
    log.info("Session started: apps=%s logs=%s gpu=%s", config.appimage_dir, config.log_dir, config.default_gpu)
    return Session(paths=paths, config=config, favorites=favorites, console=console)


# ----------------------------
# Command handlers
# ----------------------------
def cmd_help(session: Session, _arg: str = "") -> None:
    render_help(session.console, session.config, session.paths.config_file)


def cmd_list(session: Session, _arg: str = "") -> None:
    apps_dir = session.config.appimage_dir
    render_listing(
        session.console,
        session.config,
        scan_artifacts(apps_dir),
        session.favorites,
        dir_exists=apps_dir.is_dir(),
    )


def cmd_fav(session: Session, arg: str) -> None:
    console = session.console
    if not arg:
        render_usage(console, "fav")
        return

    artifact = find_artifact(session.config.appimage_dir, arg)
    if artifact is None:
        render_error(console, f"App not found: {arg}")
        return

    # store the on-disk spelling
    if not session.favorites.add(artifact.name):
        console.print(f"'{escape(artifact.name)}' is already in favorites")
        return
    console.print(f"Added '{escape(artifact.name)}' to favorites ⭐")


def cmd_unfav(session: Session, arg: str) -> None:
    console = session.console
    if not arg:
        render_usage(console, "unfav")
        return

    if not session.favorites.remove(arg):
        console.print(f"'{escape(arg)}' is not in favorites")
        return
    console.print(f"Removed '{escape(arg)}' from favorites")


def cmd_easter_egg(session: Session, _arg: str = "") -> None:
    plain(session.console, EASTER_EGG)


# whole-line keywords
SIMPLE_COMMANDS = {
    "help": cmd_help,
    "list": cmd_list,
    "eggegg": cmd_easter_egg,
}

# keyword + app name
ARG_COMMANDS = {
    "fav": cmd_fav,
    "unfav": cmd_unfav,
}


def launch_request(session: Session, line: str) -> LaunchResult:
    """Parsed -> Resolved -> PolicyDetermined -> Launched | Failed."""
    parsed = parse_command(line)

    artifact = find_artifact(session.config.appimage_dir, parsed.name)
    if artifact is None:
        return LaunchResult(LaunchStatus.NOT_FOUND, name=parsed.name)

    ignored = unknown_flags(parsed.flags)
    if ignored:
        log.debug("Ignoring unknown flags for %s: %s", parsed.name, sorted(ignored))

    policy = resolve_policy(parsed.flags, session.config.default_gpu)
    return launch_app(
        artifact.path,
        policy,
        session.config.log_dir,
        elevation=session.elevation,
        on_log_file=lambda log_file: render_logging_to(session.console, log_file),
    )


def dispatch(session: Session, line: str) -> bool:
    """Run one input line. Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True
    if line in EXIT_COMMANDS:
        return False

    parts = line.split(None, 1)
    keyword = parts[0]
    arg = parts[1].strip() if len(parts) > 1 else ""
    try:
        if line in SIMPLE_COMMANDS:
            SIMPLE_COMMANDS[line](session)
        elif keyword in ARG_COMMANDS:
            ARG_COMMANDS[keyword](session, arg)
        else:
            render_launch_result(session.console, launch_request(session, line))
    except Exception as e:
        log.exception("Command failed: %r", line)
        render_error(session.console, str(e))
    return True


def run_repl(session: Session, read_line: Optional[Callable[[str], str]] = None) -> None:
    console = session.console
    read_line = read_line or console.input

    render_banner(console, session.config)
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not dispatch(session, line):
            break

    plain(console, f"{APP_TITLE} exited.")
    log.info("Session ended")


def main() -> None:
    run_repl(bootstrap())
