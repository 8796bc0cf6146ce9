# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


def lossy_text(text: str) -> str:
    """Replace undecodable filename bytes (surrogate escapes) with U+FFFD."""
    return os.fsencode(text).decode("utf-8", errors="replace")


class FileSystemEntry(BaseModel):
    path: Path
    kind: Literal["file", "directory"] = "file"
    size: Optional[int] = None
    extension: str = ""

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return self.kind == "directory"


class OutputTarget(BaseModel):
    path: Path
    name: str
    canonical: Path

    @classmethod
    def for_path(cls, path: Path) -> "OutputTarget":
        """Build the target once the output file exists, so resolve() sees the real file."""
        try:
            canonical = path.resolve(strict=True)
        except OSError:
            canonical = path
        return cls(path=path, name=path.name, canonical=canonical)


class DocumentSection(BaseModel):
    relative_path: str
    language: str = ""
    content: str

    def render(self) -> str:
        return (
            f"## File: {self.relative_path}\n\n"
            f"```{self.language}\n"
            f"{self.content}\n"
            "```\n\n"
        )


class SkippedFile(BaseModel):
    path: str
    reason: str


class FlattenReport(BaseModel):
    """
    Outcome counters for one run.

    Per-file paths are only kept when details is set, so a default run holds
    no more than the file being processed.
    """

    source: Path
    output: Path
    details: bool = False
    included_count: int = 0
    skipped_count: int = 0
    included: list[str] = Field(default_factory=list)
    skipped: list[SkippedFile] = Field(default_factory=list)

    def add_included(self, path: str) -> None:
        self.included_count += 1
        if self.details:
            self.included.append(path)

    def add_skipped(self, path: str, reason: str) -> None:
        self.skipped_count += 1
        if self.details:
            self.skipped.append(SkippedFile(path=path, reason=reason))
