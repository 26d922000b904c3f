import logging
import string
from typing import Iterator

from arithtree.token import PUNCTUATORS, Token, TokenKind, new_token

logger = logging.getLogger(__name__)


class Lexer:
    expression: str

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def next_token(self) -> Token:
        self.skip_whitespace()
        token = self.read_token()
        logger.debug("token %s", token)
        return token

    def skip_whitespace(self) -> None:
        while (
            self._index < len(self.expression)
            and self.expression[self._index].isspace()
        ):
            self._index += 1

    def read_token(self) -> Token:
        start = self._index
        if start >= len(self.expression):
            return new_token(TokenKind.EOF, self.expression, start, start)
        char = self.expression[start]
        if char in PUNCTUATORS:
            self._index += 1
            return new_token(PUNCTUATORS[char], self.expression, start, self._index)
        if char in string.digits:
            return self.read_number()
        # unknown character: consumed, reported as Invalid, scanning continues
        self._index += 1
        return new_token(TokenKind.Invalid, self.expression, start, self._index)

    def read_number(self) -> Token:
        start = self._index
        while (
            self._index < len(self.expression)
            and self.expression[self._index] in string.digits
        ):
            self._index += 1
        return new_token(
            TokenKind.Integer,
            self.expression,
            start,
            self._index,
            self.expression[start : self._index],
        )


def tokenize(expression: str) -> list[Token]:
    return list(Lexer(expression))
