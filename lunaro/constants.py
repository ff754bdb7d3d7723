#===============================================================================
#  Lunaro | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Central place for file/folder naming conventions, config defaults and the
#  GPU-selection environment used when launching AppImages.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "Lunaro"
APP_SUBTITLE = "AppImage Launcher"
PROMPT = "lunaro> "

ARTIFACT_SUFFIX = ".AppImage"

# --- Files under the config dir (~/lunaroconf) ---
CONFIG_DIR_NAME = "lunaroconf"
CONFIG_FILE_NAME = "config"
FAVORITES_FILE_NAME = "favorites"
APP_LOG_FILE_NAME = "lunaro.log"

# --- Config keys + defaults ---
KEY_APPIMAGE_DIR = "APPIMAGE_DIR"
KEY_LOG_DIR = "LOG_DIR"
KEY_DEFAULT_GPU = "DEFAULT_GPU"

DEFAULT_APPIMAGE_DIR = "~/pwogams"
DEFAULT_LOG_DIR = "~/lunarologs"
DEFAULT_GPU = "dgpu"
GPU_CHOICES = ("dgpu", "igpu")

# --- Launch flags ---
FLAG_IGPU = "-igpu"
FLAG_DGPU = "-dgpu"
FLAG_LOG = "-l"
FLAG_ROOT = "-r"
FLAG_LOG_ROOT = "-lr"
FLAG_ROOT_LOG = "-rl"

LOG_FLAGS = frozenset({FLAG_LOG, FLAG_LOG_ROOT, FLAG_ROOT_LOG})
ROOT_FLAGS = frozenset({FLAG_ROOT, FLAG_LOG_ROOT, FLAG_ROOT_LOG})
KNOWN_FLAGS = frozenset({FLAG_IGPU, FLAG_DGPU}) | LOG_FLAGS | ROOT_FLAGS

# Chromium/Electron based AppImages refuse to start as root without this.
NO_SANDBOX_ARG = "--no-sandbox"
ELEVATION_COMMAND = ("sudo", "-E")

LOG_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# --- GPU selection (Mesa PRIME offload + Vulkan loader ICD list) ---
ENV_DRI_PRIME = "DRI_PRIME"
ENV_GLX_VENDOR = "__GLX_VENDOR_LIBRARY_NAME"
ENV_VK_ICD = "VK_ICD_FILENAMES"

IGPU_VK_ICDS = (
    "/usr/share/vulkan/icd.d/intel_icd.x86_64.json",
    "/usr/share/vulkan/icd.d/radeon_icd.x86_64.json",
)
DGPU_VK_ICDS = (
    "/usr/share/vulkan/icd.d/nvidia_icd.json",
    "/usr/share/vulkan/icd.d/amd_icd64.json",
)
