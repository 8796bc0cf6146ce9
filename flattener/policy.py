# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

from __future__ import annotations

from typing import FrozenSet

# ----- ignore tables -----
# Directory names are matched as-is; file names and extensions are stored
# lowercase and matched against the lowercased candidate.
IGNORE_DIRS: FrozenSet[str] = frozenset({
    ".git", ".idea", ".vscode", ".vs", "__pycache__", "node_modules",
    "venv", ".venv", "env", "dist", "build", "target", "out",
    "bin", "obj", "debug", "release",
    ".gradle", "captures", "gradle", ".DS_Store", "coverage", ".next", ".nuxt",
})

IGNORE_FILENAMES: FrozenSet[str] = frozenset({
    "gradlew", "gradlew.bat", "mvnw", "mvnw.cmd",
    "local.properties", "thumbs.db", "desktop.ini",
    "package-lock.json", "yarn.lock", "pnpm-lock.yaml", "cargo.lock", "poetry.lock",
})

IGNORE_EXTENSIONS: FrozenSet[str] = frozenset({
    # media
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".svg", ".webp", ".tiff",
    ".mp3", ".mp4", ".wav", ".avi", ".mov",
    # binaries / archives
    ".exe", ".dll", ".so", ".dylib", ".bin", ".apk", ".aab", ".jar", ".war",
    ".zip", ".tar", ".gz", ".7z", ".rar", ".iso", ".cab",
    # build artifacts, databases, logs
    ".pyc", ".class", ".o", ".obj", ".pdb", ".suo",
    ".db", ".sqlite", ".sqlite3", ".lock", ".log",
    # markdown, so earlier dumps and docs are never embedded
    ".md",
})


def ignored_dirs() -> FrozenSet[str]:
    return IGNORE_DIRS


def ignored_filenames() -> FrozenSet[str]:
    return IGNORE_FILENAMES


def ignored_extensions() -> FrozenSet[str]:
    return IGNORE_EXTENSIONS
