"""Evaluator for callexpr.

Walks the AST and reduces it to a value. Evaluation is eager: every
argument of a call is evaluated, left to right, before the function is
looked up and invoked. Functions therefore only ever see values, never AST
nodes, so a host function cannot skip evaluating one of its arguments.
"""

from dataclasses import dataclass, field
from typing import Any, Sequence

from callexpr.builtins import default_registry
from callexpr.errors import (
    ArgumentError,
    CallExprError,
    EvaluationError,
    FunctionError,
    MaxDepthExceeded,
)
from callexpr.functions import FunctionDefinition, FunctionRegistry
from callexpr.parser import DEFAULT_MAX_DEPTH, ASTNode, FunctionCall, Literal, parse


@dataclass(frozen=True)
class EvaluationContext:
    """Read-only inputs of an evaluation.

    Attributes:
        registry: Functions available to the program
        args: Positional host arguments read by `getArg`
        max_depth: Maximum call nesting depth
    """

    registry: FunctionRegistry
    args: tuple[Any, ...] = field(default_factory=tuple)
    max_depth: int = DEFAULT_MAX_DEPTH


class Evaluator:
    """Evaluates an AST against a context.

    Usage:
        ctx = EvaluationContext(registry=default_registry(), args=("Alice",))
        evaluator = Evaluator(ctx)
        result = evaluator.evaluate(ast)
    """

    def __init__(self, context: EvaluationContext):
        self.context = context
        self._depth = 0

    def evaluate(self, node: ASTNode) -> Any:
        """Evaluate an AST node and return the result.

        Raises:
            MaxDepthExceeded: Past max_depth, or when the Python stack runs
                out first because max_depth is set above what it can hold
        """
        try:
            return self._evaluate(node)
        except RecursionError:
            raise MaxDepthExceeded(self.context.max_depth) from None

    def _evaluate(self, node: ASTNode) -> Any:
        method_name = f"_eval_{type(node).__name__.lower()}"
        method = getattr(self, method_name, None)

        if method is None:
            raise EvaluationError(f"Unknown node type: {type(node).__name__}")

        return method(node)

    # -------------------------------------------------------------------------
    # Node type evaluators
    # -------------------------------------------------------------------------

    def _eval_literal(self, node: Literal) -> Any:
        return node.value

    def _eval_functioncall(self, node: FunctionCall) -> Any:
        """Evaluate a function call."""
        self._depth += 1
        try:
            if self._depth > self.context.max_depth:
                raise MaxDepthExceeded(self.context.max_depth)

            args = [self._evaluate(arg) for arg in node.arguments]
            func_def = self.context.registry.get(node.name)
            return self._call(func_def, args)
        finally:
            self._depth -= 1

    # -------------------------------------------------------------------------
    # Helper methods
    # -------------------------------------------------------------------------

    def _call(self, func_def: FunctionDefinition, args: list[Any]) -> Any:
        self._check_arity(func_def, args)

        call_args: list[Any] = args
        if func_def.contextual:
            call_args = [self.context, *args]

        try:
            return func_def.implementation(*call_args)
        except (CallExprError, RecursionError):
            raise
        except Exception as e:
            raise FunctionError(func_def.name, e) from e

    def _check_arity(self, func_def: FunctionDefinition, args: list[Any]) -> None:
        count = len(args)
        max_args = func_def.max_args
        if count < func_def.min_args or (max_args is not None and count > max_args):
            if max_args is None:
                expected = f"at least {func_def.min_args}"
            elif max_args == func_def.min_args:
                expected = str(max_args)
            else:
                expected = f"{func_def.min_args} to {max_args}"
            raise ArgumentError(
                f"{func_def.name} expects {expected} argument(s), got {count}"
            )


# -----------------------------------------------------------------------------
# Convenience functions
# -----------------------------------------------------------------------------


def evaluate(
    source: str,
    args: Sequence[Any] | None = None,
    registry: FunctionRegistry | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Any:
    """Parse and evaluate program text.

    Args:
        source: The program text
        args: Positional host arguments for `getArg`
        registry: Functions to use; defaults to the built-ins only
        max_depth: Maximum call nesting depth

    Returns:
        The result of evaluating the program

    Example:
        result = evaluate('(concat, "Hello, ", (getArg, 0))', ["Alice"])
        # result = "Hello, Alice"
    """
    ast = parse(source, max_depth=max_depth)
    ctx = EvaluationContext(
        registry=registry if registry is not None else default_registry(),
        args=tuple(args or ()),
        max_depth=max_depth,
    )
    return Evaluator(ctx).evaluate(ast)
