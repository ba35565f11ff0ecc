"""
Schema tree access for XSD documents.

Loads an XML Schema document with lxml and exposes a small, uniform set of
accessors over it: child nodes by tag name (always returned as a list,
whatever their cardinality), documentation text, and the ordered set of
named simple and complex type definitions.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from lxml import etree

XS_NAMESPACE = "http://www.w3.org/2001/XMLSchema"

# Nesting separator in component type names (e.g. "Patient.Contact")
COMPONENT_SEPARATOR = "."

_LINE_PATTERN = re.compile(r"[^\r\n]+")


class SchemaLoadError(Exception):
    """Raised when a schema document cannot be read or is not an XML Schema."""


def _qualified(tag: str) -> str:
    if tag.startswith("{"):
        return tag
    # Accept both "sequence" and "xs:sequence"
    local = tag.split(":", 1)[-1]
    return f"{{{XS_NAMESPACE}}}{local}"


def get_nodes(node: etree._Element | None, tag: str) -> list[etree._Element]:
    """Return all direct children of ``node`` with the given XSD tag, in document order.

    A single occurrence and repeated occurrences both come back as a list;
    a missing node yields an empty list.
    """
    if node is None:
        return []
    return node.findall(_qualified(tag))


def get_node(node: etree._Element | None, tag: str) -> etree._Element | None:
    """Return the first direct child with the given XSD tag, or None."""
    nodes = get_nodes(node, tag)
    return nodes[0] if nodes else None


def has_children(node: etree._Element | None) -> bool:
    """Whether ``node`` has any element children (comments are ignored)."""
    if node is None:
        return False
    return any(isinstance(child.tag, str) for child in node)


def get_documentation(node: etree._Element | None) -> list[str]:
    """Collect documentation lines from ``xs:annotation/xs:documentation`` children.

    Every documentation node contributes each non-empty run of characters
    between line breaks, verbatim.
    """
    lines: list[str] = []
    for annotation in get_nodes(node, "annotation"):
        for documentation in get_nodes(annotation, "documentation"):
            text = "".join(documentation.itertext())
            lines.extend(_LINE_PATTERN.findall(text))
    return lines


class TypeKind(Enum):
    """Kind of a named schema type."""

    SIMPLE = "simple"
    COMPLEX = "complex"


@dataclass(frozen=True)
class SchemaTypeDefinition:
    """One named type from the schema, with its raw structural content."""

    name: str
    kind: TypeKind
    node: etree._Element

    @property
    def is_component(self) -> bool:
        return COMPONENT_SEPARATOR in self.name

    @property
    def is_complex(self) -> bool:
        return self.kind == TypeKind.COMPLEX

    @property
    def is_simple(self) -> bool:
        return self.kind == TypeKind.SIMPLE


class SchemaTypes:
    """Ordered collection of type definitions with lookup by name.

    Iteration follows first-definition order; redefining a name replaces the
    definition but keeps its original position.
    """

    def __init__(self, definitions: list[SchemaTypeDefinition] | None = None):
        self._by_name: dict[str, SchemaTypeDefinition] = {}
        for definition in definitions or []:
            self.add(definition)

    def add(self, definition: SchemaTypeDefinition) -> None:
        self._by_name[definition.name] = definition

    def get(self, name: str | None) -> SchemaTypeDefinition | None:
        if name is None:
            return None
        return self._by_name.get(name)

    def subset(self, names: list[str]) -> SchemaTypes:
        """Build a new collection with only the named types that exist here."""
        return SchemaTypes([self._by_name[name] for name in names if name in self._by_name])

    def names(self) -> list[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[SchemaTypeDefinition]:
        return iter(list(self._by_name.values()))

    def __len__(self) -> int:
        return len(self._by_name)


def collect_types(schema: etree._Element) -> SchemaTypes:
    """Gather the named simple types, then the complex types, of a schema root."""
    types = SchemaTypes()
    for kind, tag in ((TypeKind.SIMPLE, "simpleType"), (TypeKind.COMPLEX, "complexType")):
        for node in get_nodes(schema, tag):
            name = node.get("name")
            if name is None:
                continue
            types.add(SchemaTypeDefinition(name=name, kind=kind, node=node))
    return types


def _check_root(root: etree._Element, source: str) -> etree._Element:
    if root.tag != _qualified("schema"):
        raise SchemaLoadError(f"{source}: root element is {root.tag!r}, expected xs:schema")
    return root


def parse_schema(content: str | bytes) -> etree._Element:
    """Parse schema text and return its ``xs:schema`` root element."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    parser = etree.XMLParser(remove_blank_text=True)
    try:
        root = etree.fromstring(content, parser)
    except etree.XMLSyntaxError as e:
        raise SchemaLoadError(f"Schema is not well-formed XML: {e}") from e
    return _check_root(root, "<string>")


def load_schema(path: str | Path) -> etree._Element:
    """Load a schema file and return its ``xs:schema`` root element."""
    path = Path(path)
    parser = etree.XMLParser(remove_blank_text=True)
    try:
        tree = etree.parse(str(path), parser)
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema {path}: {e}") from e
    except etree.XMLSyntaxError as e:
        raise SchemaLoadError(f"Schema {path} is not well-formed XML: {e}") from e
    return _check_root(tree.getroot(), str(path))
