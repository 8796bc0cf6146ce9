# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

from __future__ import annotations

from logging import getLogger
from pathlib import Path

from .config import SNIFF_BYTES

logger = getLogger(__name__)


def is_text_file(path: Path, sniff_bytes: int = SNIFF_BYTES) -> bool:
    """
    Treat a file as text when its first kilobyte holds no null byte.

    Empty files count as text. Files that cannot be opened or read count as
    binary, so they are dropped rather than reported.
    """
    try:
        with open(path, "rb") as fh:
            chunk = fh.read(sniff_bytes)
    except OSError as e:
        logger.debug("Sniff failed for %s: %s", path, e)
        return False
    if not chunk:
        return True
    return b"\0" not in chunk
