"""Recursive-descent reader for S-expressions.

Every step takes the whole source plus the offset of the remaining input and
returns ``(result, new_offset)``. Nothing is copied or mutated except the
token text stored in Symbol and String nodes.
"""

import logging
import re
from typing import Callable, Optional, Union

from .types import (
    DEFAULT_MAX_DEPTH,
    INT_MAX,
    INT_MIN,
    Float,
    Integer,
    List,
    Node,
    ReaderConfig,
    String,
    Symbol,
)

log = logging.getLogger(__name__)

WHITESPACE = " \t\n\r\v\f"
DIGITS = "0123456789"
DELIMITERS = '()"'

_INT_RE = re.compile(r"-?[0-9]+")


class ParseError(SyntaxError):
    """Base class for reader errors.

    ``pos`` is the character offset of the offending text in the source and
    ``fragment`` is that text (possibly empty at end of input).
    """

    def __init__(self, message: str, pos: int, fragment: str = ""):
        super().__init__(message)
        self.pos = pos
        self.fragment = fragment

    @property
    def kind(self) -> str:
        return type(self).__name__

    def line_col(self, src: str) -> tuple[int, int]:
        """1-based (line, column) of ``pos`` within ``src``."""
        line = src.count("\n", 0, self.pos) + 1
        column = self.pos - (src.rfind("\n", 0, self.pos) + 1) + 1
        return line, column


class UnexpectedEndOfInput(ParseError):
    pass


class MalformedNumber(ParseError):
    pass


class EmptySymbol(ParseError):
    pass


class UnterminatedString(ParseError):
    pass


class UnclosedList(ParseError):
    pass


class NestingTooDeep(ParseError):
    pass


# --- Scanning primitives ---

def skip_whitespace(src: str, pos: int = 0) -> int:
    end = len(src)
    while pos < end and src[pos] in WHITESPACE:
        pos += 1
    return pos


def scan_until(src: str, pos: int, stop: Callable[[str], bool]) -> tuple[str, int]:
    """Split ``src[pos:]`` at the first character satisfying ``stop``.

    Returns the matched prefix and the offset of the stop character, or
    ``len(src)`` when no character stops the scan.
    """
    end = pos
    while end < len(src) and not stop(src[end]):
        end += 1
    return src[pos:end], end


def _number_stop(ch: str) -> bool:
    return not (ch in DIGITS or ch == "." or ch == "-")


def _symbol_stop(ch: str) -> bool:
    return ch in WHITESPACE or ch in DELIMITERS


def _string_stop(ch: str) -> bool:
    return ch == '"'


# --- Leaf parsers ---

def _to_number(tok: str, pos: int) -> Optional[Node]:
    if _INT_RE.fullmatch(tok):
        value = int(tok)
        if INT_MIN <= value <= INT_MAX:
            return Integer(value, pos)
    # Out-of-range integers fall through to float, like any non-integer token.
    try:
        return Float(float(tok), pos)
    except ValueError:
        return None


def parse_number(src: str, pos: int) -> tuple[Node, int]:
    tok, rest = scan_until(src, pos, _number_stop)
    node = _to_number(tok, pos)
    if node is None:
        # Direct callers may start on a non-number character; show what follows.
        shown = tok if tok else src[rest:]
        raise MalformedNumber(f"expected numeric token, found text `{shown}`", pos, shown)
    return node, rest


def parse_symbol(src: str, pos: int) -> tuple[Symbol, int]:
    name, rest = scan_until(src, pos, _symbol_stop)
    if not name:
        found = src[pos:pos + 1]
        raise EmptySymbol(f"expected symbol, found `{found}`", pos, found)
    return Symbol(name, pos), rest


def parse_string(src: str, pos: int) -> tuple[String, int]:
    value, rest = scan_until(src, pos + 1, _string_stop)
    if rest >= len(src):
        raise UnterminatedString("unterminated string literal", pos, src[pos:])
    return String(value, pos), rest + 1


# --- Dispatch and lists ---

def parse_expr(
    src: str,
    pos: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
) -> tuple[Node, int]:
    """Parse one expression starting exactly at ``pos``."""
    if pos >= len(src):
        raise UnexpectedEndOfInput("unexpected end of input", pos)
    ch = src[pos]
    if ch in DIGITS or ch == "-":
        return parse_number(src, pos)
    if ch == '"':
        return parse_string(src, pos)
    if ch == "(":
        return parse_list(src, pos, max_depth, depth)
    return parse_symbol(src, pos)


def parse_list(
    src: str,
    pos: int,
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
) -> tuple[List, int]:
    start = pos
    if depth >= max_depth:
        raise NestingTooDeep(f"max nesting depth {max_depth} exceeded", start, "(")
    pos = skip_whitespace(src, pos + 1)
    if pos < len(src) and src[pos] == ")":
        return List((), start), pos + 1

    items: list[Node] = []
    while True:
        node, pos = parse_expr(src, pos, max_depth, depth + 1)
        items.append(node)
        pos = skip_whitespace(src, pos)
        if pos >= len(src):
            raise UnclosedList(
                f"reached end of input inside list opened at offset {start}",
                start,
                src[start:],
            )
        if src[pos] == ")":
            return List(tuple(items), start), pos + 1


def parse(source: str, config: Union[ReaderConfig, dict, None] = None) -> list[Node]:
    """Parse every top-level expression in ``source``, in source order.

    Raises a ParseError subclass on the first malformed token; nothing is
    returned for a partially valid input.
    """
    cfg = ReaderConfig.from_any(config)
    exprs: list[Node] = []
    pos = skip_whitespace(source, 0)
    try:
        while pos < len(source):
            start = pos
            try:
                node, pos = parse_expr(source, pos, cfg.max_depth)
            except RecursionError:
                raise NestingTooDeep(
                    f"nesting under offset {start} exceeds the interpreter stack",
                    start,
                    "(",
                ) from None
            exprs.append(node)
            pos = skip_whitespace(source, pos)
    except ParseError as e:
        log.debug("parse failed: %s at offset %d", e.kind, e.pos)
        raise
    log.debug("parsed %d expression(s) from %d chars", len(exprs), len(source))
    return exprs
