# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import Union

from .config import OUTPUT_SUFFIX, PLACEHOLDER_NAME
from .models import FlattenReport, OutputTarget
from .traversal import iter_files
from .writer import DocumentWriter

logger = getLogger(__name__)


def resolve_source(path: Union[str, Path]) -> Path:
    """Absolute, symlink-free source path. Raises OSError if it does not exist."""
    return Path(path).expanduser().resolve(strict=True)


def resolve_output_path(source: Path, save_inside: bool = False) -> Path:
    """
    <name>.md beside a directory source, or inside it with save_inside.
    A file source always writes into its own directory.
    """
    file_name = f"{source.name or PLACEHOLDER_NAME}{OUTPUT_SUFFIX}"
    if source.is_dir() and save_inside:
        return source / file_name
    # Path("/").parent is "/" itself
    return source.parent / file_name


def flatten(path: Union[str, Path], save_inside: bool = False, details: bool = False) -> FlattenReport:
    """
    Flatten a file or directory tree into one Markdown document.

    Setup and write failures propagate as OSError; per-file problems are
    only counted in the returned report (listed too when details is set).
    """
    source = resolve_source(path)
    output_path = resolve_output_path(source, save_inside)
    logger.info("Flattening %s -> %s", source, output_path)

    report = FlattenReport(source=source, output=output_path, details=details)
    with open(output_path, "w", encoding="utf-8", newline="") as out:
        target = OutputTarget.for_path(output_path)
        writer = DocumentWriter(source, target, out, report)
        writer.write_all(iter_files(source))

    logger.info(
        "Wrote %s: %d files included, %d skipped.",
        output_path, report.included_count, report.skipped_count,
    )
    return report
