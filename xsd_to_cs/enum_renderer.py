"""
Rendering of restricted simple types as C# enums.
"""

from __future__ import annotations

import re

from .context import RenderContext
from .schema_tree import SchemaTypeDefinition, get_node, get_nodes
from .utils import build_summary, to_title_case

# Enumerated values that are relational operators get a spelled-out member name
OPERATOR_NAMES = {
    "=": "Equal",
    ">": "GreaterThan",
    ">=": "GreaterOrEqual",
    "<": "LessThan",
    "<=": "LessOrEqual",
}

_DIGIT = re.compile(r"[0-9]")


def enum_member_name(value: str) -> str:
    """C# member name for an enumerated schema value.

    Examples:
        ">=" -> "GreaterOrEqual"
        "4.0.1" -> "N4.0.1"
        "entered-in-error" -> "EnteredInError"
    """
    if value in OPERATOR_NAMES:
        return OPERATOR_NAMES[value]
    if _DIGIT.search(value):
        return "N" + value
    return to_title_case(value)


def render_enumeration(ctx: RenderContext, type_def: SchemaTypeDefinition, margin: str, alias: str | None = None) -> str:
    """Render a simple type's ``xs:enumeration`` facets as a C# enum.

    Args:
        ctx: Render context
        type_def: Simple type holding an ``xs:restriction``
        margin: Indentation of the enum declaration
        alias: Declared enum name; defaults to the schema type name

    Returns:
        The enum declaration, or an empty string when there are no values
    """
    restriction = get_node(type_def.node, "restriction")
    enum_values = get_nodes(restriction, "enumeration")
    if not enum_values:
        return ""

    nl = ctx.newline
    member_margin = margin + ctx.indent

    text = build_summary(type_def.node, margin, nl)
    text += margin + "public enum " + (alias or type_def.name) + nl
    text += margin + "{" + nl

    members = []
    for enum_value in enum_values:
        member = build_summary(enum_value, member_margin, nl)
        member += member_margin + enum_member_name(enum_value.get("value", ""))
        members.append(member)

    text += ("," + nl).join(members) + nl
    text += margin + "}" + nl
    return text
