#===============================================================================
#  Lunaro | env_manager.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Builds the environment handed to a launched AppImage: the inherited
#  environment plus the GPU-selection overlay for the chosen mode.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .constants import (
    DGPU_VK_ICDS,
    ENV_DRI_PRIME,
    ENV_GLX_VENDOR,
    ENV_VK_ICD,
    IGPU_VK_ICDS,
)
from .models import GpuMode

# None means "must be absent in the child".
GPU_OVERLAYS: Mapping[GpuMode, Mapping[str, Optional[str]]] = MappingProxyType({
    GpuMode.INTEGRATED: MappingProxyType({
        ENV_DRI_PRIME: "0",
        ENV_GLX_VENDOR: "mesa",
        ENV_VK_ICD: os.pathsep.join(IGPU_VK_ICDS),
    }),
    GpuMode.DEDICATED: MappingProxyType({
        ENV_DRI_PRIME: "1",
        ENV_GLX_VENDOR: None,
        ENV_VK_ICD: os.pathsep.join(DGPU_VK_ICDS),
    }),
})


def apply_overlay(base: Mapping[str, str], overlay: Mapping[str, Optional[str]]) -> Dict[str, str]:
    """Return a new dict: base with overlay applied (None values removed)."""
    env = dict(base)
    for key, value in overlay.items():
        if value is None:
            env.pop(key, None)
        else:
            env[key] = value
    return env


def build_child_env(gpu_mode: GpuMode, environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Environment for the child process. Never touches os.environ itself."""
    base = os.environ if environ is None else environ
    return apply_overlay(base, GPU_OVERLAYS[gpu_mode])
