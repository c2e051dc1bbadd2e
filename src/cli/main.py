"""
CLI main entry point for Enter Two Strings.

Thin wrapper around the textops explorers - no business logic here.
"""

import sys

from textops import StringBufferOperations, StringOperations

PROG = "enter2strings"
USAGE = f"Usage: {PROG} <str1> <str2>"


def parse_arguments(argv: list[str]) -> tuple[str, str] | None:
    """
    Parse command-line arguments.

    Every argument is taken literally, so values such as "-x" or "--" are
    ordinary strings rather than options.

    Args:
        argv: Arguments without the program name

    Returns:
        (str1, str2), or None if there are not exactly two arguments
    """
    if len(argv) != 2:
        return None
    return argv[0], argv[1]


def main(argv: list[str] | None = None) -> None:
    """
    Main CLI entry point.

    Orchestrates the CLI workflow:
    1. Check there are exactly two arguments
    2. Explore string methods on both strings
    3. Explore string-buffer methods on the first, parameterized by the second
    """
    args = parse_arguments(sys.argv[1:] if argv is None else list(argv))

    if args is None:
        print(USAGE)
        return

    str1, str2 = args

    string_ops = StringOperations(str1, str2)
    string_ops.explore_string_methods()

    buffer_ops = StringBufferOperations(str1)
    buffer_ops.explore_string_buffer_methods(str2)


if __name__ == "__main__":
    main()
