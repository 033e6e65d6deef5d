"""Embeddable interpreter facade.

Ties the pipeline together for a host application:

    interp = Interpreter()
    interp.set_args(["Alice"])
    interp.register_function("shout", lambda s: s.upper())
    ast = interp.parse('(shout, (concat, "Hello, ", (getArg, 0)))')
    interp.evaluate(ast)  # "HELLO, ALICE"

An AST is immutable, so the same AST can be evaluated repeatedly with
different arguments or functions.
"""

import logging
from typing import Any, Callable, Iterable

from callexpr.builtins import default_registry
from callexpr.config import InterpreterConfig
from callexpr.evaluator import EvaluationContext, Evaluator
from callexpr.functions import FunctionDefinition, FunctionRegistry
from callexpr.parser import ASTNode, parse

logger = logging.getLogger(__name__)


class Interpreter:
    """Holds the host arguments and function registry between calls.

    Arguments and functions must not be changed while an ``evaluate`` call
    is running on the same instance. Hosts that share one interpreter
    across threads serialize those calls themselves.
    """

    def __init__(
        self,
        config: InterpreterConfig | None = None,
        registry: FunctionRegistry | None = None,
    ):
        self.config = config or InterpreterConfig()
        self.registry = registry if registry is not None else default_registry()
        self._args: tuple[Any, ...] = ()

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    def set_args(self, args: Iterable[Any]) -> None:
        """Replace the host arguments read by `getArg`."""
        self._args = tuple(args)

    def register_function(
        self,
        name: str,
        fn: Callable[..., Any],
        description: str = "",
    ) -> FunctionDefinition:
        """Add or replace a user function.

        Built-ins always win over user functions of the same name.
        """
        return self.registry.register(name, fn, description)

    def parse(self, source: str) -> ASTNode:
        """Parse program text into an AST."""
        logger.debug("Parsing %r", source)
        return parse(source, max_depth=self.config.max_depth)

    def evaluate(self, ast: ASTNode) -> Any:
        """Evaluate an AST with the current arguments and functions."""
        logger.debug("Evaluating with %d host args", len(self._args))
        ctx = EvaluationContext(
            registry=self.registry,
            args=self._args,
            max_depth=self.config.max_depth,
        )
        return Evaluator(ctx).evaluate(ast)

    def run(self, source: str) -> Any:
        """Parse and evaluate program text in one step."""
        return self.evaluate(self.parse(source))
