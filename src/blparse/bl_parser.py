"""
BL Statement Parser

Parses a BL token stream into a `Statement` tree by recursive descent.

The stream is a `collections.deque` of token strings ending with
`END_OF_INPUT`, consumed strictly from the front. Each routine consumes exactly
the tokens of the construct it recognises and leaves the rest for its caller.

Grammar
-------
    statement := IF condition THEN block (ELSE block)? END IF
               | WHILE condition DO block END WHILE
               | identifier
    block     := statement*

A block ends, without consuming it, at the first `END`, `ELSE` or
`END_OF_INPUT`. That lookahead is what lets nested blocks close correctly
without the block parser knowing which construct encloses it. One token of
lookahead always picks the production, so there is no backtracking.

Entry Points
------------
- `parse(tokens)`: Parse one statement.
- `parse_block(tokens)`: Parse a block of statements.
- `Parser`: The underlying engine, for callers supplying their own root node.

Raises
------
BLSyntaxError
    At the first grammar violation. Nothing is caught internally; the parse
    stops there and no tree is returned. Nesting deeper than the interpreter
    stack allows is reported by the entry-point functions as NESTING_TOO_DEEP.
"""

from __future__ import annotations

import logging
from collections import deque

from blparse.bl_ast import Statement
from blparse.bl_condition import Condition, parse_condition
from blparse.bl_constants import BLOCK_TERMINATORS, END_OF_INPUT
from blparse.bl_errors import BLSyntaxError, ErrorKind, assert_else_fatal
from blparse.bl_tokenizer import is_condition, is_identifier

logger = logging.getLogger(__name__)


class Parser:
    """
    BL Parser Class

    Drives the builder methods of `Statement` from a destructively consumed
    token stream.

    Attributes
    ----------
    tokens : deque[str]
        The token stream. The parser is its only consumer while parsing.
    position : int
        Number of tokens dequeued so far, i.e. the stream index of `front()`.

    Methods
    -------
    parse(s) -> Statement
        Parse one IF, WHILE or call statement into `s`.
    parse_block(s) -> Statement
        Parse zero or more statements into the block `s`.
    parse_if(s), parse_while(s), parse_call(s) -> Statement
        Parse the corresponding construct into `s`.
    """

    def __init__(self, tokens: deque[str]) -> None:
        self.tokens: deque[str] = tokens
        self.position: int = 0

    def front(self) -> str:
        return self.tokens[0] if self.tokens else END_OF_INPUT

    def dequeue(self) -> str:
        if not self.tokens:
            raise BLSyntaxError(
                ErrorKind.UNEXPECTED_TOKEN,
                "Unexpected end of token stream",
                position=self.position,
            )
        self.position += 1
        return self.tokens.popleft()

    def expect(self, keyword: str, message: str) -> str:
        """Dequeue the front token, which must be `keyword`."""
        tok = self.front()
        self._check(tok == keyword, ErrorKind.UNEXPECTED_TOKEN, message, tok)
        return self.dequeue()

    def nesting_error(self) -> BLSyntaxError:
        """The error reported when nesting exceeds the interpreter stack."""
        return BLSyntaxError(
            ErrorKind.NESTING_TOO_DEEP,
            "Statements nested too deeply",
            position=self.position,
            token=self.front(),
        )

    def _check(self, ok: bool, kind: ErrorKind, message: str, token: str) -> None:
        assert_else_fatal(ok, kind, message, position=self.position, token=token)

    def _condition(self, message: str) -> Condition:
        tok = self.front()
        self._check(is_condition(tok), ErrorKind.INVALID_CONDITION, message, tok)
        return parse_condition(self.dequeue())

    def parse(self, s: Statement) -> Statement:
        """Parse a single statement from the front of the stream into `s`."""
        tok = self.front()
        self._check(
            tok in ("IF", "WHILE") or is_identifier(tok),
            ErrorKind.INVALID_STATEMENT_START,
            f"IF, WHILE, or valid identifier not found, got {tok!r}",
            tok,
        )
        if tok == "IF":
            return self.parse_if(s)
        if tok == "WHILE":
            return self.parse_while(s)
        return self.parse_call(s)

    def parse_if(self, s: Statement) -> Statement:
        """Parse `IF condition THEN block (ELSE block)? END IF` into `s`."""
        assert self.front() == "IF", "Violation of: <IF> is a prefix of tokens"
        start = self.position
        self.dequeue()

        condition = self._condition("IF condition not valid")
        self.expect("THEN", "Expected THEN")

        then_body = self.parse_block(s.new_instance())

        tok = self.front()
        self._check(
            tok in ("ELSE", "END"),
            ErrorKind.UNEXPECTED_TOKEN,
            f"Expected ELSE or END, got {tok!r}",
            tok,
        )
        if tok == "ELSE":
            self.dequeue()
            else_body = self.parse_block(s.new_instance())
            s.assemble_if_else(condition, then_body, else_body)
        else:
            s.assemble_if(condition, then_body)
        self.expect("END", "Expected END")

        # END IF closes the statement; the token after END is taken unconditionally
        closing = self.dequeue()
        assert_else_fatal(
            closing == "IF",
            ErrorKind.UNEXPECTED_TOKEN,
            "Expected IF",
            position=self.position - 1,
            token=closing,
        )
        logger.debug("parsed %s at tokens %d-%d", s.kind.name, start, self.position - 1)
        return s

    def parse_while(self, s: Statement) -> Statement:
        """Parse `WHILE condition DO block END WHILE` into `s`."""
        assert self.front() == "WHILE", "Violation of: <WHILE> is a prefix of tokens"
        start = self.position
        self.dequeue()

        condition = self._condition("WHILE condition not valid")
        self.expect("DO", "Expected DO")

        body = self.parse_block(s.new_instance())
        s.assemble_while(condition, body)

        self.expect("END", f'Expected END, found: "{self.front()}"')
        self.expect("WHILE", "Does not contain WHILE after END")
        logger.debug("parsed WHILE at tokens %d-%d", start, self.position - 1)
        return s

    def parse_call(self, s: Statement) -> Statement:
        """Parse a single identifier as a call into `s`."""
        assert is_identifier(
            self.front()
        ), "Violation of: identifier string is a prefix of tokens"
        return s.assemble_call(self.dequeue())

    def parse_block(self, s: Statement) -> Statement:
        """Parse statements into the block `s` up to the next block terminator.

        The terminator (END, ELSE or END_OF_INPUT) is left at the front of the
        stream. An empty block is legal.
        """
        i = s.length_of_block()
        while self.front() not in BLOCK_TERMINATORS:
            child = self.parse(s.new_instance())
            s.add_to_block(i, child)
            i += 1
        logger.debug("block of %d statement(s) ends at %r", i, self.front())
        return s


def parse(tokens: deque[str]) -> Statement:
    """Parse one statement from `tokens` and return it."""
    parser = Parser(tokens)
    try:
        return parser.parse(Statement())
    except RecursionError as e:
        raise parser.nesting_error() from e


def parse_block(tokens: deque[str]) -> Statement:
    """Parse a block from `tokens` and return it."""
    parser = Parser(tokens)
    try:
        return parser.parse_block(Statement())
    except RecursionError as e:
        raise parser.nesting_error() from e
