# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

"""
Runtime constants and optional diagnostics settings.

Filtering policy and output format are fixed; the environment only controls
where (and whether) diagnostics are logged.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values

# --- fixed limits ---
MAX_FILE_BYTES = 1024 * 1024   # files above this size are skipped
SNIFF_BYTES = 1024             # prefix inspected for null bytes

# --- output naming ---
OUTPUT_SUFFIX = ".md"
PLACEHOLDER_NAME = "project-code"  # used when the source has no file name (e.g. "/")

# hidden directory that is still walked
CI_CONFIG_DIR = ".github"

# --- optional diagnostics ---
ENV_PREFIX = "FLATTEN_"

# FLATTEN_* values read from .env; the process environment is left untouched
_settings: Dict[str, str] = {}


def load_env(env_file: Optional[Path] = None) -> Dict[str, str]:
    """Read FLATTEN_* keys from a .env file (defaults to the working directory)."""
    values = dotenv_values(env_file or Path.cwd() / ".env")
    _settings.clear()
    _settings.update({
        key: value for key, value in values.items()
        if key.startswith(ENV_PREFIX) and value is not None
    })
    return dict(_settings)


def get_setting(key: str, default: str = "") -> str:
    """Process environment first, then the loaded .env values."""
    return os.getenv(key) or _settings.get(key) or default


def log_file() -> Optional[Path]:
    raw = get_setting("FLATTEN_LOG_FILE").strip()
    return Path(raw).expanduser() if raw else None


def log_level() -> str:
    return get_setting("FLATTEN_LOG_LEVEL", "INFO").strip().upper()
