"""Exception taxonomy for callexpr.

Every failure raised by the lexer, parser or evaluator derives from
CallExprError, so hosts can catch one type at the boundary. The one
condition that is *not* raised is a length mismatch in the `map` built-in,
which returns ``False`` as an ordinary result.
"""


class CallExprError(Exception):
    """Base class for all callexpr errors."""
    pass


# -----------------------------------------------------------------------------
# Lexing
# -----------------------------------------------------------------------------


class LexerError(CallExprError):
    """Error during lexical analysis."""
    pass


class TokenizationError(LexerError):
    """The source text produced no tokens at all."""

    def __init__(self, message: str = "Tokenization failed"):
        super().__init__(message)


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------


class ParseError(CallExprError):
    """Error during parsing.

    Attributes:
        position: Index of the offending token, if known
    """

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            message = f"{message} at token {position}"
        super().__init__(message)


class UnexpectedEndOfInput(ParseError):
    """The token stream ended in the middle of an expression."""

    def __init__(self, message: str = "Unexpected end of input", position: int | None = None):
        super().__init__(message, position)


class UnbalancedQuotesError(UnexpectedEndOfInput):
    """The raw source holds an odd number of double-quote characters."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Unexpected end of input: unbalanced quotes ({count} found)")


class ExpectedFunctionName(ParseError):
    """An opening parenthesis was not followed by a function name."""

    def __init__(self, position: int | None = None):
        super().__init__("Expected function name", position)


class UnexpectedTokenType(ParseError):
    """A punctuation token appeared where a constant was required."""

    def __init__(self, token_type: str, position: int | None = None):
        self.token_type = token_type
        super().__init__(f"Unexpected token type: {token_type}", position)


# -----------------------------------------------------------------------------
# Evaluation
# -----------------------------------------------------------------------------


class EvaluationError(CallExprError):
    """Error during expression evaluation."""
    pass


class UnknownFunctionError(EvaluationError):
    """Neither the built-in nor the user table defines the called name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown function: {name}")


class ArgumentError(EvaluationError):
    """A built-in was called with the wrong number of arguments."""
    pass


class ArgumentTypeError(ArgumentError):
    """A built-in was called with an argument of the wrong type."""
    pass


class SerializationError(EvaluationError):
    """A value could not be encoded as JSON."""
    pass


class FunctionError(EvaluationError):
    """A host-registered function raised while being called.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, name: str, error: BaseException):
        self.name = name
        super().__init__(f"Error calling {name}: {error}")


# -----------------------------------------------------------------------------
# Resource limits
# -----------------------------------------------------------------------------


class MaxDepthExceeded(CallExprError):
    """Expression nesting went beyond the configured maximum depth."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Maximum nesting depth of {limit} exceeded")
