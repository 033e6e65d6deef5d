"""JSON encoding of values.

Output is pretty-printed with four-space indentation and keeps non-ASCII
characters as-is. Ints stay ints (no trailing ``.0``) and floats stay
floats; map keys keep their insertion order.
"""

import json

from callexpr.errors import SerializationError
from callexpr.values import Value, type_name

INDENT = 4


def encode(value: Value) -> str:
    """Encode a value as pretty-printed JSON text.

    Raises:
        SerializationError: If the value holds something JSON cannot
            represent (host objects, NaN/Infinity, circular references)
    """
    try:
        return json.dumps(value, indent=INDENT, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            f"Cannot encode {type_name(value)} as JSON: {e}"
        ) from e
