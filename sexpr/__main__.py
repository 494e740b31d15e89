"""CLI: python -m sexpr [-v] <file.sexp | ->"""

import logging
import sys
from pathlib import Path

from .parser import parse, ParseError


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    verbose = "-v" in args
    args = [a for a in args if a != "-v"]

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args) != 1:
        print("Usage: python -m sexpr [-v] <file.sexp | ->", file=sys.stderr)
        return 1

    src = sys.stdin.read() if args[0] == "-" else Path(args[0]).read_text()

    try:
        exprs = parse(src)
    except ParseError as e:
        line, col = e.line_col(src)
        print(f"error: {e.kind} at line {line}, column {col}: {e.msg}", file=sys.stderr)
        return 1

    for node in exprs:
        print(repr(node))
    return 0


if __name__ == "__main__":
    sys.exit(main())
