"""Command that loads the two input matrices."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from sqmatrix.matrix import read_matrices


def main(argv: Sequence[str] | None = None) -> int:
    """Load two matrices from the input file; return an exit status."""
    parser = argparse.ArgumentParser(
        prog="sqmatrix",
        description="Load two square matrices from an input file.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="input.txt",
        help="file holding N followed by two NxN matrices (default: input.txt)",
    )
    args = parser.parse_args(argv)
    try:
        read_matrices(args.path)
    except (OSError, ValueError) as exc:
        print(f"sqmatrix: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())