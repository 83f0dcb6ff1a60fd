"""Map sqlglot expression trees onto the canonical tagged JSON shape.

Each node becomes ``{"<ClassName>": {<arg>: <value>, ...}}``. The field set is
the node class's declared ``arg_types`` in declaration order, with unset args
rendered as ``null``, so every variant keeps a closed, stable layout that
policy rules can address by name.
"""

from __future__ import annotations

import enum
from typing import Any

from sqlglot import exp

_SCALARS = (str, bool, int, float)


def to_canonical(node: exp.Expression) -> dict[str, Any]:
    """Convert a sqlglot expression into its tagged canonical form."""
    fields = {key: _value(node.args.get(key)) for key in type(node).arg_types}
    return {type(node).__name__: fields}


def _value(value: Any) -> Any:
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, exp.Expression):
        return to_canonical(value)
    if isinstance(value, (list, tuple)):
        return [_value(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _value(v) for k, v in value.items()}
    if isinstance(value, enum.Enum):
        return _value(value.value)
    return str(value)
