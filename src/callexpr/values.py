"""Value model for callexpr.

Values are plain Python objects rather than wrapper classes:

- Null   -> None
- Bool   -> bool
- Int    -> int
- Float  -> float
- String -> str
- List   -> list
- Map    -> dict (insertion ordered, str keys)

``bool`` is a subclass of ``int`` in Python, so every check here that cares
about the Int/Bool distinction tests for ``bool`` first.

Hosts may also pass arbitrary objects in through arguments or registered
functions. Those flow through evaluation untouched and only fail when a
built-in needs to render them (e.g. `json`).
"""

import math
from typing import Any

Value = Any

NULL = "null"
BOOL = "bool"
INT = "int"
FLOAT = "float"
STRING = "string"
LIST = "list"
MAP = "map"


def type_name(value: Value) -> str:
    """Return the value-model tag for a value.

    Foreign host objects report their Python class name.
    """
    if value is None:
        return NULL
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, int):
        return INT
    if isinstance(value, float):
        return FLOAT
    if isinstance(value, str):
        return STRING
    if isinstance(value, (list, tuple)):
        return LIST
    if isinstance(value, dict):
        return MAP
    return type(value).__name__


def is_int(value: Value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_list(value: Value) -> bool:
    return isinstance(value, (list, tuple))


def format_float(value: float) -> str:
    """Render a float the way string casts do.

    Fourteen significant digits, no trailing zeros, exponent form from
    1e14 up or below 1e-4: ``2.0`` -> ``"2"``, ``0.1 + 0.2`` -> ``"0.3"``,
    ``1e15`` -> ``"1.0E+15"``, ``1.5e-5`` -> ``"1.5E-5"``.
    """
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"

    text = f"{value:.14G}"
    if "E" not in text:
        return text

    mantissa, exponent = text.split("E")
    if "." not in mantissa:
        mantissa += ".0"
    return f"{mantissa}E{exponent[0]}{exponent[1:].lstrip('0')}"


def to_string(value: Value) -> str:
    """Cast a value to text for `concat` and map keys.

    Raises:
        TypeError: For lists and maps, which have no string form
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, dict)):
        raise TypeError(f"Cannot convert {type_name(value)} to string")
    return str(value)
