"""Form encoding of request parameters.

Stripe accepts ``application/x-www-form-urlencoded`` bodies (and query
strings) with bracket notation for nested structures:

>>> encode_params({"metadata": {"site": "lobby"}, "expand": ["location"]})
[('metadata[site]', 'lobby'), ('expand[]', 'location')]
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Tuple


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _flatten(key: str, value: Any, out: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        if not value:
            # An empty map clears the field server-side (e.g. metadata)
            out.append((key, ""))
            return
        for k, v in value.items():
            _flatten(f"{key}[{k}]", v, out)
    elif isinstance(value, (list, tuple)):
        for i, v in enumerate(value):
            _flatten(f"{key}[{i}]", v, out)
    else:
        out.append((key, _scalar(value)))


def encode_params(params: Mapping[str, Any] | None) -> List[Tuple[str, str]]:
    """Flatten ``params`` into ordered form-encoding pairs.

    ``None`` values are dropped, booleans are lowercased, and ``expand`` is
    emitted as repeated ``expand[]`` pairs.
    """
    out: List[Tuple[str, str]] = []
    if not params:
        return out
    for key, value in params.items():
        if key == "expand" and isinstance(value, (list, tuple)):
            out.extend(("expand[]", str(v)) for v in value)
            continue
        _flatten(key, value, out)
    return out
