"""Convert raw Graph records into flat attribute mappings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping

# Explicit bag of provider extras some payloads carry alongside their fields
ADDITIONAL_DATA = "additionalData"


def odata_filter(field_name: str, value: str | None) -> str | None:
    """Build an ``eq`` filter, or None when no value is given."""
    if not value:
        return None
    escaped = value.replace("'", "''")
    return f"{field_name} eq '{escaped}'"


@dataclass(frozen=True)
class ResourceSchema:
    """Typed fields of a resource kind and how to write them.

    Fields listed in ``typed_fields`` are written first (through their
    converter when one is registered); everything else on the record,
    followed by an explicit ``additionalData`` mapping, is written after
    them and wins on key collisions. None values are never written.
    """

    typed_fields: tuple[str, ...]
    converters: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def normalize(self, record: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
        """Convert a record to (identifier, attributes).

        Args:
            record: Raw record as returned by Graph

        Returns:
            Tuple of the record id ("" when missing) and its attributes
        """
        attributes: dict[str, Any] = {}

        for name in self.typed_fields:
            value = record.get(name)
            if value is None:
                continue
            converter = self.converters.get(name)
            attributes[name] = converter(value) if converter else value

        for name, value in record.items():
            if name in self.typed_fields or name == ADDITIONAL_DATA or value is None:
                continue
            attributes[name] = value

        extras = record.get(ADDITIONAL_DATA)
        if isinstance(extras, Mapping):
            for name, value in extras.items():
                if value is not None:
                    attributes[name] = value

        identifier = record.get("id") or ""
        return str(identifier), attributes
