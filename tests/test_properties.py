import re

import pytest
from sexpr.parser import parse
from sexpr.types import Integer, Symbol, List

SAMPLES = [
    '(f "arg" 2 5)',
    "((lambda (x) (* x x)) 50)",
    "(a (b (c 1.5 -2)) \"s t\") top 7",
    "(define (sq n) (mul n n))",
]


def spread(src):
    # Insert extra whitespace around every space, outside string literals.
    parts = src.split('"')
    for i in range(0, len(parts), 2):
        parts[i] = parts[i].replace(" ", " \n\t  ")
    return '"'.join(parts)


def collapse(src):
    parts = src.split('"')
    for i in range(0, len(parts), 2):
        parts[i] = re.sub(r"\s+", " ", parts[i])
    return '"'.join(parts)


@pytest.mark.parametrize("src", SAMPLES)
def test_whitespace_does_not_change_shape(src):
    spread_src = spread(src)
    assert spread_src != src
    assert parse(spread_src) == parse(collapse(spread_src)) == parse(src)


@pytest.mark.parametrize("src", SAMPLES)
def test_deterministic(src):
    assert parse(src) == parse(src)


def test_padding_inside_parens():
    assert parse("(   a   )") == parse("(a)")


def test_nodes_are_immutable():
    node = parse("(1 x)")[0]
    with pytest.raises(AttributeError):
        node.items = ()
    with pytest.raises(AttributeError):
        node[0].value = 2


def test_equality_ignores_position():
    assert parse("   42")[0] == Integer(42)
    assert parse(" (x)")[0] == List([Symbol("x")])
