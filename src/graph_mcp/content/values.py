"""Tagged attribute values for provider-supplied web part fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ValueKind(Enum):
    """Kinds of value that may appear in a web part's field bag."""

    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    MAPPING = "mapping"
    ABSENT = "absent"


@dataclass(frozen=True)
class Value:
    """A field value tagged with its kind.

    Lists and other JSON shapes the resolver never reads are tagged ABSENT.
    """

    kind: ValueKind
    raw: Any = None

    @classmethod
    def of(cls, raw: Any) -> Value:
        """Tag a raw JSON value."""
        # bool is a subclass of int, so it must be checked first
        if isinstance(raw, bool):
            return cls(ValueKind.BOOL, raw)
        if isinstance(raw, str):
            return cls(ValueKind.STRING, raw)
        if isinstance(raw, (int, float)):
            return cls(ValueKind.NUMBER, raw)
        if isinstance(raw, Mapping):
            return cls(ValueKind.MAPPING, raw)
        return ABSENT

    @classmethod
    def lookup(cls, fields: Mapping[str, Any] | None, key: str) -> Value:
        """Tag ``fields[key]``, or ABSENT when the key or bag is missing."""
        if not fields or key not in fields:
            return ABSENT
        return cls.of(fields[key])

    def string(self) -> str | None:
        """Return the string payload, or None for any other kind."""
        return self.raw if self.kind is ValueKind.STRING else None

    def non_empty_string(self) -> str | None:
        """Return the string payload when it is a non-empty string."""
        text = self.string()
        return text if text else None

    def mapping(self) -> Mapping[str, Any] | None:
        """Return the mapping payload, or None for any other kind."""
        return self.raw if self.kind is ValueKind.MAPPING else None


ABSENT = Value(ValueKind.ABSENT)
