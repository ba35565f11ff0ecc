"""
Identifier normalization and primitive type mapping for C# output.
"""

from __future__ import annotations

from collections.abc import Mapping

from lxml import etree

from .schema_tree import COMPONENT_SEPARATOR

COMPONENT_SUFFIX = "Component"

# Schema type names that would clash with a C# / framework type of the same name
TYPE_RENAMES = {"Reference": "ResourceReference"}

# Schema primitive -> C# type. A leading "?" marks a value type that becomes
# nullable when the field is optional.
PRIMITIVE_TYPES = {
    "string": "string",
    "oid": "string",
    "id": "string",
    "uuid": "string",
    "markdown": "string",
    "uri": "string",
    "code": "string",
    "date": "?DateTime",
    "dateTime": "?DateTime",
    "time": "?TimeSpan",
    "instant": "?DateTimeOffset",
    "positiveInt": "?int",
    "unsignedInt": "?int",
    "integer": "?int",
    "decimal": "?double",
    "base64Binary": "byte[]",
    "boolean": "?bool",
    "SampledDataDataType": "string",
}

NULLABLE_MARKER = "?"
UNBOUNDED = "unbounded"


def normalize_identifier(
    name: str,
    renames: Mapping[str, str] = TYPE_RENAMES,
    component_suffix: str = COMPONENT_SUFFIX,
) -> str:
    """Turn a raw schema type name into a C# identifier.

    Examples:
        "Patient.Contact" -> "ContactComponent"
        "Reference" -> "ResourceReference"
        "Address-use" -> "Address_use"
    """
    identifier = name.replace("-", "_", 1)

    if COMPONENT_SEPARATOR in identifier:
        identifier = identifier.rsplit(COMPONENT_SEPARATOR, 1)[1] + component_suffix

    return renames.get(identifier, identifier)


def identifier_base(name: str) -> str:
    """Name of the enclosing type for a component name ("Patient.Contact" -> "Patient")."""
    identifier = name.replace("-", "_", 1)
    return identifier.split(COMPONENT_SEPARATOR, 1)[0]


def is_primitive(type_name: str, primitive_types: Mapping[str, str] = PRIMITIVE_TYPES) -> bool:
    return type_name in primitive_types


def map_primitive_type(
    type_name: str,
    nullable: bool = False,
    primitive_types: Mapping[str, str] = PRIMITIVE_TYPES,
) -> str:
    """Map a normalized schema type name to its C# type.

    Value types flagged in the table get a ``?`` only when ``nullable`` is set.
    Names missing from the table are returned unchanged: they refer to
    generated classes or enums.
    """
    native = primitive_types.get(type_name)
    if native is None:
        return type_name

    if native.startswith(NULLABLE_MARKER):
        native = native[len(NULLABLE_MARKER) :]
        if nullable:
            native += NULLABLE_MARKER
    return native


def _occurs(element: etree._Element, attribute: str) -> str:
    return element.get(attribute) or "1"


def _parse_bound(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 1


def is_nullable(element: etree._Element) -> bool:
    """A field is nullable when its ``minOccurs`` is "0"."""
    return _occurs(element, "minOccurs") == "0"


def is_list(element: etree._Element) -> bool:
    """A field is repeated when ``maxOccurs`` is unbounded or either bound exceeds 1."""
    min_occurs = _occurs(element, "minOccurs")
    max_occurs = _occurs(element, "maxOccurs")

    if _parse_bound(min_occurs) > 1:
        return True

    if max_occurs == UNBOUNDED:
        return True

    return _parse_bound(max_occurs) > 1


def property_type(
    element: etree._Element,
    renames: Mapping[str, str] = TYPE_RENAMES,
    primitive_types: Mapping[str, str] = PRIMITIVE_TYPES,
    component_suffix: str = COMPONENT_SUFFIX,
) -> str:
    """C# type of an ``xs:element`` field, taking its ``minOccurs`` into account."""
    type_name = normalize_identifier(element.get("type", ""), renames, component_suffix)
    return map_primitive_type(type_name, is_nullable(element), primitive_types)
