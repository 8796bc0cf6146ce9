# Code Flattener
# Copyright (C) 2025  Aleksandr Ladygin
# Licensed under the GNU General Public License v3 or later.
#
# See the LICENSE file in the project root for full license information.

"""
flatten-md <path> [-i]

Writes <name>.md next to <path>, or inside it when -i is given and <path> is
a directory. No help text, no output on success. Exit status is 1 only when
the path cannot be resolved or the document cannot be written.
"""

from __future__ import annotations

import argparse
import sys
from logging import getLogger
from typing import List, Optional

from .config import load_env
from .logging_setup import setup_logging
from .runner import flatten

logger = getLogger(__name__)


INSIDE_FLAG = "-i"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Every argument other than -i is a path candidate; the first one wins.

    A lone -i is taken as the path itself, so it fails to resolve instead of
    passing as a missing argument.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    candidates = [a for a in argv if a != INSIDE_FLAG] or argv[:1]

    parser = argparse.ArgumentParser(prog="flatten-md", add_help=False)
    parser.add_argument("path", nargs="?", default=None)
    # "--" keeps paths such as "-notes" positional; stray arguments are ignored
    args, _ = parser.parse_known_args(["--", *candidates])
    args.save_inside = INSIDE_FLAG in argv
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if not args.path:
        return 0

    load_env()
    setup_logging()

    try:
        flatten(args.path, save_inside=args.save_inside)
    except OSError as e:
        logger.error("Flatten failed for %s: %s", args.path, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
