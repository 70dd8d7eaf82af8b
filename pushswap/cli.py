"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from .formatting import print_formatted
from .parsing import InputError, parse_arguments
from .sorter import push_swap
from .textutils import split


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 0
    if len(args) == 1:
        args = split(args[0], " ")
    try:
        values = parse_arguments(args)
    except InputError:
        print_formatted("Error\n")
        return 1
    for operation in push_swap(values):
        print_formatted("%s\n", operation.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())