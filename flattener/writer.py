# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

"""
Markdown document writer.

Each candidate goes through the filters below in order; the first one that
rejects it ends its processing:
- self_output: the file is the document being written
- ext_excluded: extension is in the ignore table
- file_too_big: larger than MAX_FILE_BYTES
- binary: null byte in the first kilobyte, or unreadable
- read_error: the full read failed
- empty: nothing but whitespace after decoding

Content is embedded verbatim; a fence inside a file is not escaped.
"""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import Iterable, Optional, TextIO

from .config import MAX_FILE_BYTES
from .models import DocumentSection, FileSystemEntry, FlattenReport, OutputTarget, lossy_text
from .policy import ignored_extensions
from .sniffer import is_text_file

logger = getLogger(__name__)


def relative_path(path: Path, root: Path) -> str:
    """Forward-slash path below root, with undecodable name bytes replaced."""
    if path == root:
        # a single-file source is its own root
        return ""
    try:
        rel = path.relative_to(root)
    except ValueError:
        rel = path
    return lossy_text(str(rel)).replace("\\", "/")


def read_bytes(path: Path) -> Optional[bytes]:
    try:
        return path.read_bytes()
    except OSError as e:
        logger.debug("Read failed for %s: %s", path, e)
        return None


class DocumentWriter:
    """Filters candidates and appends one Markdown section per surviving file."""

    def __init__(self, source_root: Path, target: OutputTarget, stream: TextIO, report: FlattenReport):
        self.source_root = source_root
        self.target = target
        self.stream = stream
        self.report = report

    def _is_self_output(self, path: Path) -> bool:
        if path.name == self.target.name:
            return True
        try:
            return path.resolve(strict=True) == self.target.canonical
        except OSError:
            return False

    def _skip_reason(self, entry: FileSystemEntry) -> Optional[str]:
        if self._is_self_output(entry.path):
            return "self_output"
        if entry.extension and f".{entry.extension.lower()}" in ignored_extensions():
            return "ext_excluded"
        if entry.size is not None and entry.size > MAX_FILE_BYTES:
            return "file_too_big"
        if not is_text_file(entry.path):
            return "binary"
        return None

    def _skip(self, rel: str, reason: str) -> None:
        logger.debug("Skipped %s (%s)", rel, reason)
        self.report.add_skipped(rel, reason)

    def build_section(self, entry: FileSystemEntry) -> Optional[DocumentSection]:
        rel = relative_path(entry.path, self.source_root)

        reason = self._skip_reason(entry)
        if reason:
            self._skip(rel, reason)
            return None

        data = read_bytes(entry.path)
        if data is None:
            self._skip(rel, "read_error")
            return None

        content = data.decode("utf-8", errors="replace")
        if not content.strip():
            self._skip(rel, "empty")
            return None

        return DocumentSection(
            relative_path=rel,
            language=entry.extension.lower(),
            content=content,
        )

    def write_entry(self, entry: FileSystemEntry) -> Optional[DocumentSection]:
        section = self.build_section(entry)
        if section is None:
            return None
        self.stream.write(section.render())
        self.report.add_included(section.relative_path)
        return section

    def write_all(self, entries: Iterable[FileSystemEntry]) -> FlattenReport:
        for entry in entries:
            self.write_entry(entry)
        self.stream.flush()
        return self.report
