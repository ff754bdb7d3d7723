#===============================================================================
#  Lunaro | display.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Terminal output: banner, help text, app listing (favorites first) and the
#  one-line status messages for launches and favorites.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

from rich.console import Console
from rich.markup import escape

from .config import LauncherConfig
from .constants import APP_SUBTITLE, APP_TITLE
from .favorites import dedupe
from .models import Artifact, LaunchResult, LaunchStatus

HELP_TEXT = """\
{title} - {subtitle}

USAGE:
  <appname> [flags]

COMMANDS:
  list      - Show all AppImages in the app directory
  fav <app> - Add an app to favorites (shows at top of list)
  unfav <app> - Remove an app from favorites
  help      - Show this help message
  exit/quit - Exit {title}

FLAGS:
  -igpu     - Launch with integrated GPU
  -dgpu     - Launch with dedicated GPU (default)
  -l        - Enable logging
  -r        - Launch with root permissions (adds --no-sandbox if needed)
  -lr/-rl   - Enable both logging and root

EXAMPLES:
  LunarMC
  LunarMC -igpu
  LunarMC -r -l
  Discord -igpu -rl
  fav LunarMC
  unfav Discord

CONFIGURATION:
  Config file: {config_file}
  App directory: {appimage_dir}
  Log directory: {log_dir}
  Default GPU: {default_gpu}"""

EASTER_EGG = """\
    🥚
   🥚"""


def plain(console: Console, text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False)


def render_banner(console: Console, config: LauncherConfig) -> None:
    console.print(f"[bold]{APP_TITLE}[/bold] started.")
    plain(console, f"App directory: {config.appimage_dir}")
    plain(console, f"Log directory: {config.log_dir}")
    plain(console, f"Default GPU: {config.default_gpu}")
    console.print("Type [bold]'help'[/bold] for commands or [bold]'exit'[/bold] to quit.")


def render_help(console: Console, config: LauncherConfig, config_file: Path) -> None:
    plain(console, HELP_TEXT.format(
        title=APP_TITLE,
        subtitle=APP_SUBTITLE,
        config_file=config_file,
        appimage_dir=config.appimage_dir,
        log_dir=config.log_dir,
        default_gpu=config.default_gpu,
    ))


def split_listing(artifacts: Iterable[Artifact], favorites: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Return (favorite names that exist, every other app name).

    Favorites keep their stored order; stale or duplicate favorites are dropped.
    """
    names = [a.name for a in artifacts]
    present = set(names)
    favs = [f for f in dedupe(favorites) if f in present]
    fav_set = set(favs)
    others = [n for n in names if n not in fav_set]
    return favs, others


def render_listing(console: Console, config: LauncherConfig, artifacts: List[Artifact], favorites: Iterable[str], dir_exists: bool = True) -> None:
    plain(console, f"Available AppImages in {config.appimage_dir}:")
    if not dir_exists:
        plain(console, "  Directory does not exist")
        return

    stored = dedupe(favorites)
    favs, others = split_listing(artifacts, stored)
    # header shows whenever favorites are stored, even if all of them are stale
    if stored:
        console.print("\n[bold yellow]⭐ FAVORITES:[/bold yellow]")
        for name in favs:
            plain(console, f"  {name}")

    console.print("\n[bold cyan]📦 ALL APPS:[/bold cyan]")
    for name in others:
        plain(console, f"  {name}")
    if not artifacts:
        plain(console, "  (none found)")


def render_launch_result(console: Console, result: LaunchResult) -> None:
    name = escape(result.name)
    if result.status is LaunchStatus.NOT_FOUND:
        console.print(f"[red]Error:[/red] App not found: {name}")
        console.print("Use 'list' to see available apps")
        console.print('Use the command "help" for more info')
        return
    if result.status is LaunchStatus.PERMISSION_DENIED:
        console.print(f"[red]Error:[/red] Cannot make executable: {escape(result.error or result.name)}")
        return
    if result.status is LaunchStatus.LAUNCH_FAILED:
        console.print(f"[red]Error:[/red] Failed to launch {name}: {escape(result.error)}")
        return

    suffix = " (root + --no-sandbox)" if result.elevated else ""
    console.print(f"[green]Launched:[/green] {name} with {result.gpu_label}{escape(suffix)}")


def render_logging_to(console: Console, log_file: Path) -> None:
    plain(console, f"Logging to: {log_file}")


def render_error(console: Console, message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")


def render_usage(console: Console, command: str) -> None:
    render_error(console, "Please specify an app name")
    plain(console, f"Usage: {command} <appname>")
