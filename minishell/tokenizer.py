"""Split a command line into tokens."""

from __future__ import annotations

from minishell.models import (
    FORBIDDEN_SYMBOLS,
    OPERATOR_SYMBOLS,
    WHITESPACE,
    Token,
    TokenType,
)


class TokenizeError(ValueError):
    """Raised when a line contains a character the shell cannot tokenize."""

    def __init__(self, line: str, position: int) -> None:
        super().__init__(
            f"unexpected character {line[position]!r} at position {position}"
        )
        self.line = line
        self.position = position


def _operator_at(line: str, pos: int) -> Token:
    char = line[pos]
    following = line[pos + 1 : pos + 2]
    if char == "|":
        return Token("|", TokenType.PIPE)
    if char == "<":
        if following == "<":
            return Token("<<", TokenType.HEREDOC)
        return Token("<", TokenType.INPUT)
    if following == ">":
        return Token(">>", TokenType.APPEND)
    return Token(">", TokenType.OUTPUT)


def _is_word_char(char: str) -> bool:
    return (
        char not in WHITESPACE
        and char not in OPERATOR_SYMBOLS
        and char not in FORBIDDEN_SYMBOLS
    )


def tokenize(line: str) -> list[Token]:
    """Return the tokens of ``line``; raise TokenizeError on a forbidden symbol."""
    tokens: list[Token] = []
    pos = 0
    length = len(line)
    while pos < length:
        char = line[pos]
        if char in WHITESPACE:
            pos += 1
            continue
        if char in OPERATOR_SYMBOLS:
            token = _operator_at(line, pos)
            tokens.append(token)
            pos += len(token.content)
            continue
        end = pos
        while end < length and _is_word_char(line[end]):
            end += 1
        if end == pos:
            raise TokenizeError(line, pos)
        tokens.append(Token(line[pos:end], TokenType.WORD))
        pos = end
    return tokens