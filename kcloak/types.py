"""JSON field types that accept more than one wire shape."""
from __future__ import annotations
import json
from typing import Any, Union

from .exceptions import DecodeError

Bytes = Union[bytes, bytearray, str]


def _text(data: Bytes) -> str:
    if isinstance(data, (bytes, bytearray)):
        return data.decode("utf-8")
    return data


class StringOrArray(list):
    """List of strings sent by Keycloak either as "a" or as ["a", "b"].

    A single element is written back as a bare string, anything else
    (including no elements) as an array.
    """

    @classmethod
    def loads(cls, data: Bytes) -> "StringOrArray":
        """Decode a JSON string or a JSON array of strings.

        Raises:
            DecodeError: If the data is neither
        """
        try:
            value = json.loads(_text(data))
        except (ValueError, UnicodeDecodeError) as exc:
            raise DecodeError(f"cannot decode string or array: {exc}") from exc
        return cls.from_json(value)

    @classmethod
    def from_json(cls, value: Any) -> "StringOrArray":
        if isinstance(value, str):
            return cls([value])
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return cls(value)
        raise DecodeError(f"cannot decode {type(value).__name__} into an array of strings")

    def to_json(self) -> Union[str, list]:
        if len(self) == 1:
            return self[0]
        return list(self)

    def dumps(self) -> str:
        return json.dumps(self.to_json(), separators=(",", ":"), ensure_ascii=False)


class EnforcedString(str):
    """String field that Keycloak sometimes fills with other JSON values.

    JSON strings are unquoted; numbers, booleans, objects and arrays keep
    their JSON text. Writing always produces a JSON string, so a decoded
    object goes back out as a string holding the object's text.
    """

    @classmethod
    def loads(cls, data: Bytes) -> "EnforcedString":
        """Decode any JSON value into a string.

        Raises:
            DecodeError: If the data is not valid JSON
        """
        try:
            text = _text(data)
            value = json.loads(text)
        except (ValueError, UnicodeDecodeError) as exc:
            raise DecodeError(f"cannot decode enforced string: {exc}") from exc
        if isinstance(value, str):
            return cls(value)
        return cls(text)

    @classmethod
    def from_json(cls, value: Any) -> "EnforcedString":
        # The raw text of a nested value is gone once the document is parsed.
        if isinstance(value, str):
            return cls(value)
        return cls(json.dumps(value, separators=(",", ":"), ensure_ascii=False))

    def to_json(self) -> str:
        return str(self)

    def dumps(self) -> str:
        return json.dumps(str(self), ensure_ascii=False)
