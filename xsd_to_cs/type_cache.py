"""
Run-scoped cache of the fields rendered for each root class.

Each committed entry is an immutable snapshot. A subclass field set starts as
an empty overlay on top of its base snapshot; the base is shared, never
copied or mutated.
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Iterator, Mapping
from types import MappingProxyType

EMPTY_FIELDS: Mapping[str, str] = MappingProxyType({})


class FieldSet(Mapping[str, str]):
    """Field name -> rendered C# type, layered over an optional base field set."""

    def __init__(self, base: Mapping[str, str] | None = None):
        self._own: dict[str, str] = {}
        self._fields = ChainMap(self._own, base if base is not None else EMPTY_FIELDS)

    def add(self, name: str, type_name: str) -> None:
        self._own[name] = type_name

    def own_fields(self) -> Mapping[str, str]:
        return MappingProxyType(self._own)

    def snapshot(self) -> Mapping[str, str]:
        """Read-only view of this field set; later ``add`` calls are not expected."""
        return MappingProxyType(self._fields)

    def __getitem__(self, name: str) -> str:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)


class TypeCache:
    """Maps class names to the field set they were rendered with."""

    def __init__(self):
        self._entries: dict[str, Mapping[str, str]] = {}

    def get(self, class_name: str | None) -> Mapping[str, str] | None:
        if class_name is None:
            return None
        return self._entries.get(class_name)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._entries

    def derive(self, base: str | None) -> FieldSet:
        """Start a field set for a class inheriting from ``base`` (if cached)."""
        return FieldSet(self.get(base))

    def commit(self, class_name: str, fields: FieldSet) -> None:
        self._entries[class_name] = fields.snapshot()

    def names(self) -> list[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
