from __future__ import annotations

import types
import typing
from typing import Any, Mapping, Optional

# value-like results default to their zero value, everything else to None
_ZERO_VALUES = {bool: False, int: 0, float: 0.0, complex: 0j}
_EMPTY_CONTAINERS = (list, tuple, dict, set, frozenset)


def default_for(result_type: Any) -> Any:
    """Default result of an unmatched (Loose) or exhausted call for `result_type`."""
    if result_type is None or result_type is type(None):
        return None

    if result_type in _ZERO_VALUES:
        return _ZERO_VALUES[result_type]

    # Optional[X] and friends: the absence of a value is the natural default
    origin = typing.get_origin(result_type)
    if origin is typing.Union or origin is types.UnionType:
        return None

    container = origin or result_type
    # subclasses (NamedTuple, Counter, ...) may need constructor arguments
    if container in _EMPTY_CONTAINERS:
        return container()
    return None


class DefaultValueProvider:
    """Looks up a method's declared result type and produces its default."""

    def __init__(self, result_types: Optional[Mapping[str, Any]] = None) -> None:
        self.result_types = dict(result_types or {})

    def result_type(self, method_name: str) -> Any:
        return self.result_types.get(method_name)

    def default(self, method_name: str) -> Any:
        return default_for(self.result_type(method_name))
