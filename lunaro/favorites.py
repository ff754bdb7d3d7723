#===============================================================================
#  Lunaro | favorites.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Persistent favorites list (~/lunaroconf/favorites): one app name per line,
#  oldest first. The whole file is rewritten on every change.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

log = logging.getLogger(__name__)


def dedupe(names: Iterable[str]) -> List[str]:
    """Drop blanks and repeats, keeping first-seen order."""
    seen = set()
    out: List[str] = []
    for n in names:
        n = n.strip()
        if not n or n in seen:
            continue
        seen.add(n)
        out.append(n)
    return out


def read_favorites(fav_path: Path) -> List[str]:
    if not fav_path.exists():
        return []
    lines = fav_path.read_text(encoding="utf-8", errors="ignore").splitlines()
    names = dedupe(lines)
    if len(names) != len([ln for ln in lines if ln.strip()]):
        log.warning("Duplicate entries in %s were ignored", fav_path)
    return names


def write_favorites(fav_path: Path, names: Iterable[str]) -> None:
    fav_path.parent.mkdir(parents=True, exist_ok=True)
    body = "".join(f"{n}\n" for n in names)
    fav_path.write_text(body, encoding="utf-8")


class FavoriteSet:
    """Ordered, duplicate-free set of app names backed by a flat file.

    Names need not match an existing AppImage; listing hides the stale ones.
    """

    def __init__(self, fav_path: Path, names: Iterable[str] = ()):
        self.path = fav_path
        self._names: List[str] = dedupe(names)

    @classmethod
    def load(cls, fav_path: Path) -> "FavoriteSet":
        if not fav_path.exists():
            write_favorites(fav_path, [])
        return cls(fav_path, read_favorites(fav_path))

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    @property
    def names(self) -> List[str]:
        return list(self._names)

    def add(self, name: str) -> bool:
        """Append name. False (and no write) if it is already there."""
        if name in self._names:
            return False
        self._names.append(name)
        self.save()
        log.info("Added favorite %r", name)
        return True

    def remove(self, name: str) -> bool:
        """Exact-match removal. False (and no write) if absent."""
        if name not in self._names:
            return False
        self._names = [n for n in self._names if n != name]
        self.save()
        log.info("Removed favorite %r", name)
        return True

    def save(self) -> None:
        write_favorites(self.path, self._names)
