"""callexpr: an embeddable evaluator for call expressions.

Programs are either constants or calls of the form ``(name, arg, ...)``.

This package provides:
- Lexer: Tokenizes program text
- Parser: Produces AST from tokens
- FunctionRegistry: Built-in and host-registered functions
- Evaluator: Evaluates AST against host arguments
- Interpreter: Facade tying the above together
"""

from callexpr.builtins import default_registry, register_all_builtins
from callexpr.codec import encode
from callexpr.config import InterpreterConfig
from callexpr.errors import (
    ArgumentError,
    ArgumentTypeError,
    CallExprError,
    EvaluationError,
    ExpectedFunctionName,
    FunctionError,
    LexerError,
    MaxDepthExceeded,
    ParseError,
    SerializationError,
    TokenizationError,
    UnbalancedQuotesError,
    UnexpectedEndOfInput,
    UnexpectedTokenType,
    UnknownFunctionError,
)
from callexpr.evaluator import EvaluationContext, Evaluator, evaluate
from callexpr.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionParameter,
    FunctionRegistry,
)
from callexpr.interpreter import Interpreter
from callexpr.lexer import Lexer, Token, TokenType, tokenize
from callexpr.parser import (
    ASTNode,
    FunctionCall,
    Literal,
    Parser,
    parse,
    parse_tokens,
)

__version__ = "0.1.0"

__all__ = [
    # Interpreter
    "Interpreter",
    "InterpreterConfig",
    # Evaluator
    "EvaluationContext",
    "Evaluator",
    "evaluate",
    "encode",
    # Functions
    "FunctionCategory",
    "FunctionDefinition",
    "FunctionParameter",
    "FunctionRegistry",
    "default_registry",
    "register_all_builtins",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Parser
    "ASTNode",
    "FunctionCall",
    "Literal",
    "Parser",
    "parse",
    "parse_tokens",
    # Errors
    "ArgumentError",
    "ArgumentTypeError",
    "CallExprError",
    "EvaluationError",
    "ExpectedFunctionName",
    "FunctionError",
    "LexerError",
    "MaxDepthExceeded",
    "ParseError",
    "SerializationError",
    "TokenizationError",
    "UnbalancedQuotesError",
    "UnexpectedEndOfInput",
    "UnexpectedTokenType",
    "UnknownFunctionError",
]
