#===============================================================================
#  Lunaro | flags.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Splits a launch line into app name + flags and turns the flags (plus the
#  configured default GPU) into a launch policy.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import AbstractSet

from .constants import FLAG_DGPU, FLAG_IGPU, KNOWN_FLAGS, LOG_FLAGS, ROOT_FLAGS
from .models import GpuChoice, GpuMode, LaunchPolicy, ParsedCommand


def parse_command(line: str) -> ParsedCommand:
    """Split `<name> [flags...]` on whitespace.

    Unknown flags are kept in the set but never change the policy.
    """
    tokens = line.split()
    if not tokens:
        raise ValueError("Empty command line")
    return ParsedCommand(name=tokens[0], flags=frozenset(tokens[1:]))


def unknown_flags(flags: AbstractSet[str]) -> AbstractSet[str]:
    return frozenset(flags) - KNOWN_FLAGS


def default_gpu_mode(default_gpu: GpuChoice) -> GpuMode:
    return GpuMode.INTEGRATED if default_gpu == "igpu" else GpuMode.DEDICATED


def resolve_gpu_mode(flags: AbstractSet[str], default_gpu: GpuChoice) -> GpuMode:
    # -igpu is checked first, so it wins when both are given
    if FLAG_IGPU in flags:
        return GpuMode.INTEGRATED
    if FLAG_DGPU in flags:
        return GpuMode.DEDICATED
    return default_gpu_mode(default_gpu)


def resolve_policy(flags: AbstractSet[str], default_gpu: GpuChoice) -> LaunchPolicy:
    return LaunchPolicy(
        gpu_mode=resolve_gpu_mode(flags, default_gpu),
        logging=not LOG_FLAGS.isdisjoint(flags),
        elevated=not ROOT_FLAGS.isdisjoint(flags),
    )
