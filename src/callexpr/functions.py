"""Function registry for callexpr.

Functions are callable from programs (e.g. ``(concat, "a", "b")``). The
registry holds two disjoint tables:

- built-ins: fixed functions supplied by callexpr itself
- user functions: callables registered by the host

Lookup always tries built-ins first, so a user function registered under a
built-in's name is never reached.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable

from callexpr.errors import UnknownFunctionError

logger = logging.getLogger(__name__)


class FunctionCategory(Enum):
    """Categories for organizing functions in documentation."""

    COLLECTION = "collection"
    STRING = "string"
    CONTEXT = "context"
    SERIALIZATION = "serialization"
    USER = "user"


@dataclass(frozen=True)
class FunctionParameter:
    """Definition of a function parameter.

    Attributes:
        name: Parameter name
        type: Expected type ("int", "list", "any", ...)
        description: Human-readable description
        variadic: If True, this parameter accepts any number of values
    """

    name: str
    type: str
    description: str
    variadic: bool = False


@dataclass(frozen=True)
class FunctionDefinition:
    """Complete definition of a callable function.

    Attributes:
        name: Function name as used in programs
        description: Human-readable description
        category: Category for documentation organization
        parameters: Parameter definitions, or None to skip arity checking
        return_type: Type of the return value
        examples: Example programs using this function
        implementation: The Python callable
        contextual: If True, the implementation receives the
            EvaluationContext before the evaluated arguments
    """

    name: str
    description: str
    category: FunctionCategory
    parameters: tuple[FunctionParameter, ...] | None
    return_type: str
    implementation: Callable[..., Any]
    examples: tuple[str, ...] = field(default_factory=tuple)
    contextual: bool = False

    @property
    def is_variadic(self) -> bool:
        return self.parameters is None or any(p.variadic for p in self.parameters)

    @property
    def min_args(self) -> int:
        if self.parameters is None:
            return 0
        return sum(1 for p in self.parameters if not p.variadic)

    @property
    def max_args(self) -> int | None:
        """Maximum argument count, None when unbounded."""
        if self.is_variadic:
            return None
        return len(self.parameters)

    def to_dict(self) -> dict[str, Any]:
        """Export for documentation output."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type,
                    "description": p.description,
                    "variadic": p.variadic,
                }
                for p in self.parameters or ()
            ],
            "returnType": self.return_type,
            "examples": list(self.examples),
        }


class FunctionRegistry:
    """Registry of built-in and user functions.

    Example:
        registry = FunctionRegistry()
        registry.register("double", lambda x: x * 2)

        func = registry.get("double")
        result = func.implementation(5)  # Returns 10
    """

    def __init__(self, builtins: Iterable[FunctionDefinition] = ()):
        self._builtins: dict[str, FunctionDefinition] = {}
        self._user: dict[str, FunctionDefinition] = {}
        for func_def in builtins:
            self.register_builtin(func_def)

    def register_builtin(self, func_def: FunctionDefinition) -> None:
        """Register a built-in function definition."""
        self._builtins[func_def.name] = func_def

    def register(
        self,
        name: str,
        implementation: Callable[..., Any],
        description: str = "",
    ) -> FunctionDefinition:
        """Add or replace a user function.

        Args:
            name: Function name as used in programs
            implementation: Callable taking evaluated values positionally
            description: Optional human-readable description

        Returns:
            The stored definition
        """
        if not callable(implementation):
            raise TypeError(f"Function '{name}' implementation is not callable")
        if name in self._builtins:
            logger.warning(
                "User function '%s' is shadowed by the built-in of the same name", name
            )
        func_def = FunctionDefinition(
            name=name,
            description=description or getattr(implementation, "__doc__", None) or "",
            category=FunctionCategory.USER,
            parameters=None,
            return_type="any",
            implementation=implementation,
        )
        self._user[name] = func_def
        logger.debug("Registered user function '%s'", name)
        return func_def

    def get(self, name: str) -> FunctionDefinition:
        """Get a function definition by name, built-ins first.

        Raises:
            UnknownFunctionError: If neither table has the name
        """
        if name in self._builtins:
            return self._builtins[name]
        if name in self._user:
            return self._user[name]
        raise UnknownFunctionError(name)

    def is_registered(self, name: str) -> bool:
        """Check if a function is registered in either table."""
        return name in self._builtins or name in self._user

    def is_builtin(self, name: str) -> bool:
        return name in self._builtins

    def list_all(self) -> list[FunctionDefinition]:
        """List every reachable function, built-ins first."""
        reachable = [f for n, f in self._user.items() if n not in self._builtins]
        return list(self._builtins.values()) + reachable

    def list_by_category(self, category: FunctionCategory) -> list[FunctionDefinition]:
        """List functions in a specific category."""
        return [f for f in self.list_all() if f.category == category]

    def export_documentation(self) -> dict[str, Any]:
        """Export the registry for documentation output.

        Returns:
            Dict with all function definitions organized by category
        """
        by_category: dict[str, list[dict[str, Any]]] = {}
        for func_def in self.list_all():
            by_category.setdefault(func_def.category.value, []).append(func_def.to_dict())

        return {
            "functions": {f.name: f.to_dict() for f in self.list_all()},
            "byCategory": by_category,
        }

    def copy(self) -> "FunctionRegistry":
        """Return an independent registry with the same entries."""
        clone = FunctionRegistry(self._builtins.values())
        clone._user = dict(self._user)
        return clone

    def clear_user_functions(self) -> None:
        """Remove all user functions. Built-ins stay."""
        self._user.clear()
