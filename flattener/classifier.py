# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

from __future__ import annotations

from .config import CI_CONFIG_DIR
from .models import FileSystemEntry
from .policy import ignored_dirs, ignored_filenames


def should_skip_dir(name: str) -> bool:
    """Hidden directories (except CI config) and known tool/build directories."""
    if name.startswith(".") and len(name) > 1 and name != CI_CONFIG_DIR:
        return True
    return name in ignored_dirs()


def should_skip_file(name: str) -> bool:
    return name.lower() in ignored_filenames()


def is_hidden_or_ignored(name: str, is_dir: bool) -> bool:
    """
    Return True if the traversal should drop this entry.

    For a directory this prunes the whole subtree. Extensions and content are
    checked later by the writer, only for files.
    """
    if is_dir:
        return should_skip_dir(name)
    return should_skip_file(name)


def is_excluded_entry(entry: FileSystemEntry) -> bool:
    return is_hidden_or_ignored(entry.name, entry.is_dir)
