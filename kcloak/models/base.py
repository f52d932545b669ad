"""Base class for Keycloak representations.

Every representation is a dataclass whose fields default to None, meaning
"absent". ``to_dict`` drops absent fields, ``from_dict`` ignores keys it does
not know, and ``str()`` renders the object as sorted, tab-indented JSON.
``redacted()`` is the same rendering with credentials masked, for logs.
"""
from __future__ import annotations
import dataclasses
import json
import typing
from typing import Any, Dict, List, Optional, Type, TypeVar

from ..query import JSON_NAME, OMIT_EMPTY
from ..types import EnforcedString, StringOrArray

M = TypeVar("M", bound="Model")

REDACTED = "**********"
SENSITIVE_SUFFIXES = ("secret", "secretdata", "password", "token")


def attr(json_name: Optional[str] = None, omitempty: bool = True) -> Any:
    """Declare a representation field.

    Args:
        json_name: Key used on the wire; defaults to the camelCase form of
            the attribute name
        omitempty: Leave the key out of to_dict() when the value is None
    """
    metadata = {OMIT_EMPTY: omitempty}
    if json_name is not None:
        metadata[JSON_NAME] = json_name
    return dataclasses.field(default=None, metadata=metadata)


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _json_name(field: dataclasses.Field) -> str:
    return field.metadata.get(JSON_NAME) or camel_case(field.name)


def _encode(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, (StringOrArray, EnforcedString)):
        return value.to_json()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


def _is_sensitive(key: str) -> bool:
    key = key.lower()
    return key == "value" or key.endswith(SENSITIVE_SUFFIXES)


def _redact(value: Any) -> Any:
    if isinstance(value, list):
        return [_redact(item) for item in value]
    if isinstance(value, dict):
        return {
            key: REDACTED if isinstance(item, str) and _is_sensitive(key) else _redact(item)
            for key, item in value.items()
        }
    return value


def _decode(hint: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = typing.get_origin(hint)
    if origin is typing.Union:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        return _decode(args[0], value) if len(args) == 1 else value
    if origin is list:
        (item_hint,) = typing.get_args(hint) or (Any,)
        return [_decode(item_hint, item) for item in value]
    if origin is dict:
        _, item_hint = typing.get_args(hint) or (str, Any)
        return {key: _decode(item_hint, item) for key, item in value.items()}
    if isinstance(hint, type):
        if issubclass(hint, Model):
            return hint.from_dict(value)
        if issubclass(hint, (StringOrArray, EnforcedString)):
            return hint.from_json(value)
    return value


class Model:
    """Mixin shared by all representation dataclasses."""

    _hints_cache: Dict[type, Dict[str, Any]] = {}

    @classmethod
    def _hints(cls) -> Dict[str, Any]:
        hints = Model._hints_cache.get(cls)
        if hints is None:
            hints = typing.get_type_hints(cls)
            Model._hints_cache[cls] = hints
        return hints

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire form of the object, without absent fields."""
        result: Dict[str, Any] = {}
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if value is None and field.metadata.get(OMIT_EMPTY, True):
                continue
            result[_json_name(field)] = _encode(value)
        return result

    @classmethod
    def from_dict(cls: Type[M], data: Optional[Dict[str, Any]]) -> M:
        """Build an object from its wire form; unknown keys are ignored."""
        data = data or {}
        hints = cls._hints()
        kwargs = {}
        for field in dataclasses.fields(cls):
            key = _json_name(field)
            if key in data:
                kwargs[field.name] = _decode(hints.get(field.name, Any), data[key])
        return cls(**kwargs)

    @classmethod
    def from_list(cls: Type[M], items: Optional[List[Dict[str, Any]]]) -> List[M]:
        return [cls.from_dict(item) for item in items or []]

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent="\t", sort_keys=True, ensure_ascii=False)

    def redacted(self) -> str:
        """Render like str(), with passwords, secrets and tokens masked."""
        return json.dumps(_redact(self.to_dict()), indent="\t", sort_keys=True, ensure_ascii=False)
