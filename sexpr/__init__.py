from .types import Integer, Float, Symbol, String, List, Node, ReaderConfig
from .parser import (
    parse,
    ParseError,
    UnexpectedEndOfInput,
    MalformedNumber,
    EmptySymbol,
    UnterminatedString,
    UnclosedList,
    NestingTooDeep,
)

__all__ = [
    "parse", "Integer", "Float", "Symbol", "String", "List", "Node", "ReaderConfig",
    "ParseError", "UnexpectedEndOfInput", "MalformedNumber", "EmptySymbol",
    "UnterminatedString", "UnclosedList", "NestingTooDeep",
]
