"""
Tokenizer for BL source text.

Turns raw source into the flat token stream the parser consumes: a
`collections.deque` of strings terminated by `END_OF_INPUT`. Tokens are plain
strings; classification is left to the recognizers below.

Classes:
    CharacterStream: Character cursor with line/column tracking.
    Tokenizer: Splits a CharacterStream into word and symbol tokens.

Functions:
    tokens(source): Tokenize a whole source string into a deque.
    is_keyword(token), is_condition(token), is_identifier(token): Recognizers.

Rules:
    - Whitespace separates tokens and is discarded.
    - `#` starts a comment that runs to the end of the line.
    - A word is a maximal run of letters, digits and `-`.
    - Any other character is returned on its own as a one-character token.

Example:
    >>> list(tokens("IF next-is-empty THEN move END IF"))
    ['IF', 'next-is-empty', 'THEN', 'move', 'END', 'IF', '### END OF INPUT ###']
"""

import re
from collections import deque

from blparse.bl_constants import CONDITION_NAMES, END_OF_INPUT, KEYWORDS

_IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9-]*")


class CharacterStream:
    """
    Reads characters from a source string, tracking line and column.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0
        self.line = 1
        self.column = 1

    def next(self) -> str:
        """
        Consumes and returns the next character.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.end_of_file():
            raise EOFError(
                f"Attempted to read past end of source at line {self.line}, col {self.column}"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self) -> str:
        """Returns the current character without advancing, or "" at end of input."""
        if self.end_of_file():
            return ""
        return self.source[self.position]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "-")


class Tokenizer:
    """Splits a CharacterStream into BL tokens.

    Attributes:
        stream (CharacterStream): The source being tokenized.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def skip_whitespace(self) -> None:
        """Skips whitespace and `#` comments."""
        while not self.stream.end_of_file():
            ch = self.stream.peek()
            if ch.isspace():
                self.stream.next()
            elif ch == "#":
                while not self.stream.end_of_file() and self.stream.peek() != "\n":
                    self.stream.next()
            else:
                break

    def next_token(self) -> str | None:
        """Returns the next token, or None once the source is exhausted."""
        self.skip_whitespace()
        if self.stream.end_of_file():
            return None

        if not _is_word_char(self.stream.peek()):
            return self.stream.next()

        word = ""
        while not self.stream.end_of_file() and _is_word_char(self.stream.peek()):
            word += self.stream.next()
        return word


def tokens(source: str) -> deque[str]:
    """Tokenizes `source` into a deque terminated by `END_OF_INPUT`."""
    tokenizer = Tokenizer(CharacterStream(source))
    result: deque[str] = deque()
    while True:
        tok = tokenizer.next_token()
        if tok is None:
            break
        result.append(tok)
    result.append(END_OF_INPUT)
    return result


def is_keyword(token: str) -> bool:
    return token in KEYWORDS


def is_condition(token: str) -> bool:
    return token in CONDITION_NAMES


def is_identifier(token: str) -> bool:
    """True if `token` can name a procedure call.

    An identifier starts with a letter, continues with letters, digits or `-`,
    and is neither a keyword nor a condition.
    """
    return (
        _IDENTIFIER_RE.fullmatch(token) is not None
        and not is_keyword(token)
        and not is_condition(token)
    )


__all__ = [
    "CharacterStream",
    "Tokenizer",
    "tokens",
    "is_keyword",
    "is_condition",
    "is_identifier",
    "END_OF_INPUT",
]
