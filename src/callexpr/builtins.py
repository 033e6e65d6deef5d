"""Built-in functions for callexpr.

This module defines the fixed built-in table:

- array:  (array, a, b, ...)     -> list of the arguments
- concat: (concat, a, b, ...)    -> arguments cast to text and joined
- getArg: (getArg, i)            -> i-th host argument, or null when out of range
- map:    (map, keys, values)    -> map pairing keys with values positionally,
                                    or false when the lengths differ
- json:   (json, value)          -> pretty-printed JSON text

Note that `map` signals a length mismatch by *returning* ``False`` rather
than raising. Callers that feed its result onward should check for it.

Built-ins take exactly the arguments they declare. Extra arguments are an
ArgumentError rather than being ignored, so ``(getArg, 0, 1)`` fails instead
of returning the first argument.
"""

from typing import TYPE_CHECKING, Any

from callexpr.codec import encode
from callexpr.errors import ArgumentTypeError
from callexpr.functions import (
    FunctionCategory,
    FunctionDefinition,
    FunctionParameter,
    FunctionRegistry,
)
from callexpr.values import is_int, is_list, to_string, type_name

if TYPE_CHECKING:
    from callexpr.evaluator import EvaluationContext


def _array(*args: Any) -> list[Any]:
    """Return the arguments as a list."""
    return list(args)


def _concat(*args: Any) -> str:
    """Concatenate all arguments cast to text."""
    try:
        return "".join(to_string(a) for a in args)
    except TypeError as e:
        raise ArgumentTypeError(f"concat: {e}") from e


def _get_arg(context: "EvaluationContext", index: Any) -> Any:
    """Return the host argument at index, None if out of range."""
    if not is_int(index):
        raise ArgumentTypeError(
            f"getArg: index must be int, got {type_name(index)}"
        )
    if 0 <= index < len(context.args):
        return context.args[index]
    return None


def _map(keys: Any, values: Any) -> dict[str, Any] | bool:
    """Pair keys with values; False when the lengths differ."""
    if not is_list(keys):
        raise ArgumentTypeError(f"map: keys must be list, got {type_name(keys)}")
    if not is_list(values):
        raise ArgumentTypeError(f"map: values must be list, got {type_name(values)}")
    if len(keys) != len(values):
        return False
    try:
        return {to_string(k): v for k, v in zip(keys, values)}
    except TypeError as e:
        raise ArgumentTypeError(f"map: invalid key: {e}") from e


def _json(value: Any) -> str:
    """Encode a value as pretty-printed JSON."""
    return encode(value)


BUILTINS: tuple[FunctionDefinition, ...] = (
    FunctionDefinition(
        name="array",
        description="Returns a list of the arguments in order",
        category=FunctionCategory.COLLECTION,
        parameters=(
            FunctionParameter("items", "any", "List elements", variadic=True),
        ),
        return_type="list",
        examples=("(array, 1, 2, 3)", "(array)"),
        implementation=_array,
    ),
    FunctionDefinition(
        name="concat",
        description="Concatenates the arguments as text",
        category=FunctionCategory.STRING,
        parameters=(
            FunctionParameter("parts", "any", "Values to join", variadic=True),
        ),
        return_type="string",
        examples=('(concat, "Hello, ", (getArg, 0))',),
        implementation=_concat,
    ),
    FunctionDefinition(
        name="getArg",
        description="Returns the host argument at an index, or null when out of range",
        category=FunctionCategory.CONTEXT,
        parameters=(
            FunctionParameter("index", "int", "Zero-based argument index"),
        ),
        return_type="any",
        examples=("(getArg, 0)",),
        implementation=_get_arg,
        contextual=True,
    ),
    FunctionDefinition(
        name="map",
        description=(
            "Pairs keys with values positionally; returns false if the "
            "lists differ in length"
        ),
        category=FunctionCategory.COLLECTION,
        parameters=(
            FunctionParameter("keys", "list", "Keys, cast to text"),
            FunctionParameter("values", "list", "Values"),
        ),
        return_type="map|bool",
        examples=('(map, (array, "a", "b"), (array, 1, 2))',),
        implementation=_map,
    ),
    FunctionDefinition(
        name="json",
        description="Serializes a value to pretty-printed JSON",
        category=FunctionCategory.SERIALIZATION,
        parameters=(
            FunctionParameter("value", "any", "The value to encode"),
        ),
        return_type="string",
        examples=('(json, (array, "x", "y"))',),
        implementation=_json,
    ),
)


def register_all_builtins(registry: FunctionRegistry) -> None:
    """Register all built-in functions with a registry."""
    for func_def in BUILTINS:
        registry.register_builtin(func_def)


def default_registry() -> FunctionRegistry:
    """Create a registry preloaded with the built-ins."""
    registry = FunctionRegistry()
    register_all_builtins(registry)
    return registry
