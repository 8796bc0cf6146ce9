# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

"""
Flatten a source tree into a single Markdown document.

Pipeline: policy tables, entry classifier, text sniffer, traversal, writer.
"""

import logging

from .models import DocumentSection, FileSystemEntry, FlattenReport, OutputTarget, SkippedFile
from .runner import flatten, resolve_output_path, resolve_source
from .traversal import iter_files
from .writer import DocumentWriter

# silent unless setup_logging() attaches a handler
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DocumentSection",
    "FileSystemEntry",
    "FlattenReport",
    "OutputTarget",
    "SkippedFile",
    "DocumentWriter",
    "flatten",
    "iter_files",
    "resolve_output_path",
    "resolve_source",
]
