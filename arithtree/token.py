from dataclasses import dataclass
from enum import IntEnum


class TokenKind(IntEnum):
    Integer = 1
    Plus = 2
    Minus = 3
    Multiply = 4
    Divide = 5
    OpenParen = 6
    CloseParen = 7
    EOF = 8
    Invalid = 9


PUNCTUATORS = {
    "+": TokenKind.Plus,
    "-": TokenKind.Minus,
    "*": TokenKind.Multiply,
    "/": TokenKind.Divide,
    "(": TokenKind.OpenParen,
    ")": TokenKind.CloseParen,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""
    location: int = 0
    length: int = 0
    expression: str = ""

    def __str__(self) -> str:
        return f"{self.kind.name} {self.text!r} @{self.location}"


def new_token(
    kind: TokenKind, expression: str, start: int, end: int, text: str = ""
) -> Token:
    return Token(kind, text, start, end - start, expression)


def equal(token: Token, kind: TokenKind) -> bool:
    return token.kind == kind
