import logging
from typing import NoReturn, Optional

from arithtree.errors import (
    InvalidCharacterError,
    MalformedNumberError,
    ParseError,
    UnexpectedTokenError,
)
from arithtree.helper import digits_to_int
from arithtree.node import Node, NumberNode, new_binary, new_number
from arithtree.token import Token, TokenKind, equal
from arithtree.tokenize import Lexer

logger = logging.getLogger(__name__)

EXPECTED_TEXT = {
    TokenKind.Integer: "number",
    TokenKind.Plus: "'+'",
    TokenKind.Minus: "'-'",
    TokenKind.Multiply: "'*'",
    TokenKind.Divide: "'/'",
    TokenKind.OpenParen: "'('",
    TokenKind.CloseParen: "')'",
    TokenKind.EOF: "end of input",
}


class Parse:
    """Recursive-descent parser with one token of lookahead.

    Precedence levels, lowest first:

        expr   := term (('+' | '-') term)*
        term   := factor (('*' | '/') factor)*
        factor := INTEGER | '(' expr ')'
    """

    lexer: Lexer
    current_token: Token

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.current_token = lexer.next_token()

    def parse(self) -> Node:
        try:
            node = self.convert_add_token()
        except RecursionError:
            raise ParseError(
                "expression nested too deeply", self.current_token
            ) from None
        if not equal(self.current_token, TokenKind.EOF):
            self.fail(self.current_token, "extra input after expression")
        return node

    def eat(self, kind: TokenKind) -> Token:
        token = self.current_token
        if not equal(token, kind):
            self.fail(token, f"expected {EXPECTED_TEXT[kind]}", kind)
        self.current_token = self.lexer.next_token()
        return token

    def convert_add_token(self) -> Node:
        node = self.convert_mul_token()
        while True:
            token = self.current_token
            if equal(token, TokenKind.Plus) or equal(token, TokenKind.Minus):
                self.eat(token.kind)
                next_node = self.convert_mul_token()
                node = new_binary(token.kind, node, next_node)
                continue
            return node

    def convert_mul_token(self) -> Node:
        node = self.primary_token()
        while True:
            token = self.current_token
            if equal(token, TokenKind.Multiply) or equal(token, TokenKind.Divide):
                self.eat(token.kind)
                next_node = self.primary_token()
                node = new_binary(token.kind, node, next_node)
                continue
            return node

    def primary_token(self) -> Node:
        token = self.current_token
        if equal(token, TokenKind.OpenParen):
            self.eat(TokenKind.OpenParen)
            node = self.convert_add_token()
            self.eat(TokenKind.CloseParen)
            return node
        if equal(token, TokenKind.Integer):
            self.eat(TokenKind.Integer)
            return get_number(token)
        self.fail(token, "expected an expression")

    def fail(
        self, token: Token, message: str, expected: Optional[TokenKind] = None
    ) -> NoReturn:
        if equal(token, TokenKind.Invalid):
            character = token.expression[token.location]
            raise InvalidCharacterError(f"invalid character {character!r}", token)
        logger.debug("unexpected %s: %s", token, message)
        raise UnexpectedTokenError(message, token, expected)


def get_number(token: Token) -> NumberNode:
    if not token.text.isascii() or not token.text.isdigit():
        raise MalformedNumberError(f"malformed number {token.text!r}", token)
    logger.debug("number %s", token.text)
    return new_number(digits_to_int(token.text))


def parse(expression: str) -> Node:
    return Parse(Lexer(expression)).parse()
