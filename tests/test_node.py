import pytest

from arithtree.node import (
    BinaryOperator,
    BinaryOpNode,
    NumberNode,
    new_binary,
    render,
)
from arithtree.parse import parse
from arithtree.token import TokenKind


def test_operator_from_token_kind():
    assert BinaryOperator.from_token_kind(TokenKind.Plus) == BinaryOperator.Add
    assert BinaryOperator.from_token_kind(TokenKind.Divide) == BinaryOperator.Div
    with pytest.raises(KeyError):
        BinaryOperator.from_token_kind(TokenKind.OpenParen)


@pytest.mark.parametrize(
    "operator, symbol",
    [
        (BinaryOperator.Add, "+"),
        (BinaryOperator.Sub, "-"),
        (BinaryOperator.Mul, "*"),
        (BinaryOperator.Div, "/"),
    ],
)
def test_operator_symbol(operator, symbol):
    assert operator.symbol == symbol


def test_new_binary():
    node = new_binary(TokenKind.Minus, NumberNode(1), NumberNode(2))
    assert node == BinaryOpNode(BinaryOperator.Sub, NumberNode(1), NumberNode(2))


def test_render_number():
    assert render(NumberNode(42)) == "Number: 42\n"


def test_render_tree():
    assert render(parse("1+2*3")) == (
        "BinaryOp: +\n"
        "  Number: 1\n"
        "  BinaryOp: *\n"
        "    Number: 2\n"
        "    Number: 3\n"
    )


def test_render_with_indent():
    assert render(parse("4/2"), indent=1) == (
        "  BinaryOp: /\n" "    Number: 4\n" "    Number: 2\n"
    )


def test_render_rejects_unknown_node():
    with pytest.raises(TypeError):
        render("1")


def test_render_long_chain():
    lines = render(parse("+".join(["1"] * 3000))).splitlines()
    assert len(lines) == 2 * 3000 - 1
    assert lines[0] == "BinaryOp: +"
    assert lines[2998] == "  " * 2998 + "BinaryOp: +"
    assert lines[2999] == "  " * 2999 + "Number: 1"
    assert lines[-1] == "  Number: 1"


def test_render_long_number():
    assert render(NumberNode(10**5000)) == "Number: 1" + "0" * 5000 + "\n"
