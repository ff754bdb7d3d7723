#===============================================================================
#  Lunaro  |  AppImage Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-02-10
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  An interactive prompt that launches AppImages kept in one folder.
#  Supports:
#    - Case-insensitive app names (`discord` finds Discord.AppImage)
#    - GPU selection per launch (-igpu / -dgpu, default from config)
#    - Optional per-launch log files (-l) and root launches (-r)
#    - Favorites shown at the top of `list`
#
#  Folder Conventions
#  ------------------
#    ~/lunaroconf/config       -> APPIMAGE_DIR, LOG_DIR, DEFAULT_GPU
#    ~/lunaroconf/favorites    -> one app name per line
#    ~/lunaroconf/lunaro.log   -> launcher's own log
#    $APPIMAGE_DIR/*.AppImage  -> launchable apps
#    $LOG_DIR/<App>_<time>.log -> output of launches started with -l
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (e.g., rich) which are licensed
#  separately by their respective authors. Ensure compliance with their
#  license terms when distributing this software.
#===============================================================================

from lunaro.repl import main


if __name__ == "__main__":
    main()
