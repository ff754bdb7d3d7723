#===============================================================================
#  Lunaro | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Filesystem discovery for AppImages and case-insensitive name resolution.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from .constants import ARTIFACT_SUFFIX
from .models import Artifact

log = logging.getLogger(__name__)


def logical_name(path: Path) -> Optional[str]:
    """Filename with the AppImage suffix stripped, or None if it isn't one."""
    name = path.name
    if not name.endswith(ARTIFACT_SUFFIX):
        return None
    stem = name[: -len(ARTIFACT_SUFFIX)]
    return stem or None


def iter_artifacts(apps_dir: Path) -> Iterator[Artifact]:
    """Yield AppImages in directory listing order (no recursion).

    A missing directory yields nothing.
    """
    if not apps_dir.is_dir():
        return
    for item in apps_dir.iterdir():
        name = logical_name(item)
        if name is None or not item.is_file():
            continue
        yield Artifact(name=name, path=item)


def scan_artifacts(apps_dir: Path) -> List[Artifact]:
    """Snapshot of the app directory, sorted for display."""
    return sorted(iter_artifacts(apps_dir), key=lambda a: (a.name.lower(), a.name))


def find_artifact(apps_dir: Path, name: str) -> Optional[Artifact]:
    """Case-insensitive exact match on the logical name.

    With case-variant duplicates (App.AppImage + APP.AppImage) the first one in
    listing order wins.
    """
    wanted = name.lower()
    for artifact in iter_artifacts(apps_dir):
        if artifact.name.lower() == wanted:
            return artifact
    log.info("No AppImage named %r in %s", name, apps_dir)
    return None


def resolve_artifact(apps_dir: Path, name: str) -> Optional[Path]:
    artifact = find_artifact(apps_dir, name)
    return artifact.path if artifact else None
