"""Parser for callexpr.

Converts a list of tokens into an Abstract Syntax Tree (AST) by recursive
descent over the grammar:

    expression := call | constant
    call       := "(" name ( "," expression )* ")"
    constant   := "true" | "false" | "null" | string | number | word

Commas are pure separators: repeated or missing commas between arguments
are tolerated. Bare words that are not keywords become string constants.
Tokens left over after the first complete expression are ignored.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from callexpr.errors import (
    ExpectedFunctionName,
    MaxDepthExceeded,
    UnexpectedEndOfInput,
    UnexpectedTokenType,
)
from callexpr.lexer import Token, TokenType, tokenize

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

# Integer literals saturate at the largest signed 64-bit value.
INT_MAX = 2**63 - 1

KEYWORDS: dict[str, Any] = {
    "true": True,
    "false": False,
    "null": None,
}


# -----------------------------------------------------------------------------
# AST Node Types
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class ASTNode:
    """Base class for AST nodes."""
    pass


@dataclass(frozen=True)
class Literal(ASTNode):
    """A constant value (string, number, boolean, null)."""
    value: Any


@dataclass(frozen=True)
class FunctionCall(ASTNode):
    """Function call, e.g. ``(concat, a, b)``."""
    name: str
    arguments: tuple[ASTNode, ...] = field(default_factory=tuple)


# -----------------------------------------------------------------------------
# Parser
# -----------------------------------------------------------------------------


class Parser:
    """Recursive descent parser over a token list.

    The parser owns a cursor (``position``) that every parsing step reads
    and advances.

    Usage:
        parser = Parser(tokenize('(array, 1, 2)'))
        ast = parser.parse()
    """

    def __init__(
        self,
        tokens: list[Token],
        position: int = 0,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.tokens = tokens
        self.position = position
        self.max_depth = max_depth
        self._depth = 0

    def parse(self) -> ASTNode:
        """Parse one expression from the current position and return it.

        Raises:
            MaxDepthExceeded: Past max_depth, or when the Python stack runs
                out first because max_depth is set above what it can hold
        """
        try:
            return self._parse_expression()
        except RecursionError:
            raise MaxDepthExceeded(self.max_depth) from None

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _current(self) -> Token | None:
        """Get current token, or None past the end."""
        if self.position >= len(self.tokens):
            return None
        return self.tokens[self.position]

    def _advance(self) -> Token | None:
        """Consume and return current token."""
        token = self._current()
        self.position += 1
        return token

    # -------------------------------------------------------------------------
    # Parsing methods
    # -------------------------------------------------------------------------

    def _parse_expression(self) -> ASTNode:
        start = self.position
        token = self._advance()
        if token is None:
            raise UnexpectedEndOfInput(position=start)

        if token.type == TokenType.LPAREN:
            self._depth += 1
            if self._depth > self.max_depth:
                raise MaxDepthExceeded(self.max_depth)
            try:
                return self._parse_function_call()
            finally:
                self._depth -= 1

        return self._parse_constant(token, start)

    def _parse_function_call(self) -> FunctionCall:
        """Parse the rest of a call after its opening parenthesis."""
        name_token = self._advance()
        if name_token is None:
            raise ExpectedFunctionName(self.position - 1)

        arguments: list[ASTNode] = []
        while True:
            token = self._current()
            if token is None:
                raise UnexpectedEndOfInput(position=self.position)
            if token.type == TokenType.RPAREN:
                self._advance()
                break
            if token.type == TokenType.COMMA:
                self._advance()
                continue
            arguments.append(self._parse_expression())

        return FunctionCall(name_token.value, tuple(arguments))

    def _parse_constant(self, token: Token, position: int) -> Literal:
        if token.type == TokenType.STRING:
            return Literal(token.value)

        if token.type == TokenType.NUMBER:
            if "." in token.value:
                return Literal(float(token.value))
            return Literal(min(int(token.value), INT_MAX))

        if token.type == TokenType.WORD:
            if token.value in KEYWORDS:
                return Literal(KEYWORDS[token.value])
            # Unrecognized words are string constants.
            return Literal(token.value)

        raise UnexpectedTokenType(token.type.name, position)


def parse_tokens(
    tokens: list[Token],
    position: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> tuple[ASTNode, int]:
    """Parse one expression starting at ``position``.

    Returns:
        The AST node and the cursor position just after it
    """
    parser = Parser(tokens, position, max_depth)
    node = parser.parse()
    return node, parser.position


def parse(source: str, max_depth: int = DEFAULT_MAX_DEPTH) -> ASTNode:
    """Convenience function to parse program text.

    Args:
        source: The program text
        max_depth: Maximum call nesting depth

    Returns:
        The AST root node
    """
    tokens = tokenize(source)
    node, consumed = parse_tokens(tokens, 0, max_depth)
    if consumed < len(tokens):
        logger.debug("Ignoring %d trailing tokens", len(tokens) - consumed)
    return node
