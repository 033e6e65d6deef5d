"""Lexer/tokenizer for callexpr.

Converts program text into a list of tokens for the parser.

Token types:
- Punctuation: LPAREN, RPAREN, COMMA
- Literals: STRING (already unescaped), NUMBER (raw digits text)
- WORD: function names, keywords and bare identifiers

Scanning is permissive: characters that match no token pattern are dropped
without an error.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto

from callexpr.errors import TokenizationError, UnbalancedQuotesError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Types of tokens in the language."""

    LPAREN = auto()      # (
    RPAREN = auto()      # )
    COMMA = auto()       # ,
    STRING = auto()      # "..."
    NUMBER = auto()      # 42, 2.4
    WORD = auto()        # concat, true, anything else


@dataclass(frozen=True)
class Token:
    """A single token from the lexer.

    Attributes:
        type: The token type
        value: Token text; string literals are stored without quotes and unescaped
        position: Character offset in the whitespace-normalized source
    """

    type: TokenType
    value: str
    position: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


# Alternation order matters: the first alternative that matches wins.
TOKEN_RE = re.compile(
    r"(?P<LPAREN>\()"
    r"|(?P<RPAREN>\))"
    r"|(?P<COMMA>,)"
    r'|(?P<STRING>"(?:[^"\\]|\\.)*")'
    r"|(?P<NUMBER>[0-9]+\.[0-9]+|[0-9]+)"
    r"|(?P<WORD>\w+)"
)

WHITESPACE_RE = re.compile(r"\s+")


def unescape_string(raw: str) -> str:
    """Strip surrounding quotes and decode only ``\\"`` and ``\\\\``.

    The two replacements run one after the other over the whole string, so
    other sequences such as ``\\n`` pass through as backslash + char.
    """
    return raw[1:-1].replace('\\"', '"').replace("\\\\", "\\")


class Lexer:
    """Tokenizer for program text.

    Usage:
        lexer = Lexer('(concat, "Hello, ", (getArg, 0))')
        for token in lexer.tokenize():
            print(token)
    """

    def __init__(self, source: str):
        self.source = source
        # Runs of whitespace collapse to one space, inside string literals too.
        self.text = WHITESPACE_RE.sub(" ", source)

    def __iter__(self):
        return iter(self.tokenize())

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source.

        Raises:
            TokenizationError: If no tokens were produced
            UnbalancedQuotesError: If the text holds an odd number of '"'
        """
        tokens = [self._make_token(match) for match in TOKEN_RE.finditer(self.text)]

        if not tokens:
            raise TokenizationError()

        # Coarse parity check over the raw text, escaped quotes included.
        quotes = self.text.count('"')
        if quotes % 2 != 0:
            raise UnbalancedQuotesError(quotes)

        logger.debug("Tokenized %d chars into %d tokens", len(self.source), len(tokens))
        return tokens

    def _make_token(self, match: re.Match) -> Token:
        token_type = TokenType[match.lastgroup]
        value = match.group()
        if token_type == TokenType.STRING:
            value = unescape_string(value)
        return Token(token_type, value, match.start())


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize program text."""
    return Lexer(source).tokenize()
