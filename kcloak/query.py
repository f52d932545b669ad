"""Query parameter encoding for the ``Get*Params`` data classes."""
from __future__ import annotations
import dataclasses
from typing import Any, Dict, Optional

from .exceptions import EncodeError

QUERY_NAME = "query"
JSON_NAME = "json"
OMIT_EMPTY = "omitempty"


def param(name: str, omitempty: bool = True) -> Any:
    """Declare a query parameter field.

    The name is used both on the URL and as the JSON key when the parameter
    object is rendered.

    Args:
        name: Parameter name as sent on the URL
        omitempty: Leave the parameter out when the field is None

    Returns:
        A dataclass field defaulting to None
    """
    return dataclasses.field(
        default=None,
        metadata={QUERY_NAME: name, JSON_NAME: name, OMIT_EMPTY: omitempty},
    )


def _render(value: Any, name: str) -> str:
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise EncodeError(f"query parameter '{name}' has unsupported type {type(value).__name__}")


def get_query_params(params: Optional[Any]) -> Dict[str, str]:
    """Map a parameter object to a name -> text dictionary.

    Only fields declared with param() take part. None fields declared with
    ``omitempty`` are skipped, a None field without it is sent empty.

    Args:
        params: Dataclass instance, or None

    Returns:
        Dictionary suitable for ``requests`` ``params=``

    Raises:
        EncodeError: If params is not a dataclass instance or a field holds
            a value that has no query representation
    """
    if params is None:
        return {}
    if not dataclasses.is_dataclass(params) or isinstance(params, type):
        raise EncodeError(f"cannot build query parameters from {type(params).__name__}")

    result: Dict[str, str] = {}
    for field in dataclasses.fields(params):
        name = field.metadata.get(QUERY_NAME)
        if name is None:
            continue
        value = getattr(params, field.name)
        if value is None:
            if field.metadata.get(OMIT_EMPTY, True):
                continue
            result[name] = ""
            continue
        result[name] = _render(value, name)
    return result
