#!/usr/bin/env python3
"""RGBA Splitter - split images into R, G, B and A channel maps.

Each selected file ``dir/name.ext`` produces ``dir/name/name_R.png``,
``name_G.png``, ``name_B.png`` and ``name_A.png`` as grayscale PNGs.
Without file arguments a native file dialog is shown.
"""

import argparse
import sys
from pathlib import Path

from rgba_splitter import SUPPORTED_EXTENSIONS, pick_files, process
from rgba_splitter.file_picker import is_supported


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Split images into single-channel R, G, B and A maps"
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Image files to split (default: choose with a file dialog)",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Maximum number of worker processes (default: CPU count)",
    )

    args = parser.parse_args(argv)

    unsupported = [str(f) for f in args.files if not is_supported(f)]
    if unsupported:
        parser.error(
            f"unsupported file type: {', '.join(unsupported)} "
            f"(expected one of: {', '.join(SUPPORTED_EXTENSIONS)})"
        )
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be >= 1")

    return args


def main(argv=None) -> int:
    """Application entry point."""
    args = parse_args(argv)

    files = args.files or pick_files()
    if not files:
        return 0

    results = process(files, max_workers=args.workers)
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
