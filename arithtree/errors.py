from typing import Optional

from arithtree.helper import error_message
from arithtree.token import Token, TokenKind


class ArithTreeError(Exception):
    """Base class for every failure raised by arithtree."""

    def __init__(self, message: str, token: Optional[Token] = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token

    @property
    def location(self) -> Optional[int]:
        return self.token.location if self.token else None

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return error_message(
            self.token.expression,
            self.token.location,
            self.message,
            self.token.length,
        ).rstrip("\n")


class ParseError(ArithTreeError):
    pass


class UnexpectedTokenError(ParseError):
    def __init__(
        self,
        message: str,
        token: Token,
        expected: Optional[TokenKind] = None,
    ) -> None:
        super().__init__(message, token)
        self.expected = expected


class InvalidCharacterError(ParseError):
    pass


class MalformedNumberError(ParseError):
    pass


class EvaluationError(ArithTreeError):
    pass
