# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

"""
Lazy directory walk that prunes ignored subtrees and yields only files.
"""

from __future__ import annotations

import os
from logging import getLogger
from pathlib import Path
from typing import Iterator, Optional

from .classifier import is_hidden_or_ignored, should_skip_dir
from .models import FileSystemEntry, lossy_text

logger = getLogger(__name__)


def _file_size(path: Path) -> Optional[int]:
    try:
        return path.stat().st_size
    except OSError:
        return None


def make_entry(path: Path) -> FileSystemEntry:
    _, ext = os.path.splitext(path.name)
    return FileSystemEntry(
        path=path,
        kind="file",
        size=_file_size(path),
        extension=lossy_text(ext[1:]),
    )


def _on_walk_error(err: OSError) -> None:
    logger.debug("Walk error skipped: %s", err)


def iter_files(root: Path) -> Iterator[FileSystemEntry]:
    """
    Yield file entries under root, depth-first.

    The root is classified like any other entry, so an ignored root yields
    nothing. Symlinked directories are listed but never followed.
    """
    if not root.is_dir():
        if root.exists() and not is_hidden_or_ignored(root.name, is_dir=False):
            yield make_entry(root)
        return

    if should_skip_dir(root.name):
        return

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_walk_error):
        # in-place directory filter, os.walk will not descend into dropped names
        dirnames[:] = sorted(d for d in dirnames if not should_skip_dir(d))
        for fn in sorted(filenames):
            if is_hidden_or_ignored(fn, is_dir=False):
                continue
            yield make_entry(Path(dirpath) / fn)
