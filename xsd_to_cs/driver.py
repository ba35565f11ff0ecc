"""
Type graph driver.

Walks a collection of schema types and renders them: the designated main
type goes to the primary text, every other complex type is rendered one
indentation level deeper as embedded text, and restricted simple types
become enums when an alias is being resolved.
"""

from __future__ import annotations

from .complex_renderer import NESTED_MARKER, render_complex_type
from .config import NestedPlacement
from .context import RenderContext
from .enum_renderer import render_enumeration
from .schema_tree import SchemaTypes, get_node


def render_types(
    ctx: RenderContext,
    types: SchemaTypes,
    main_type: str | None = None,
    margin: str = "",
    alias: str | None = None,
) -> str:
    """Render every type of ``types``.

    Args:
        ctx: Render context of the current run
        types: Types to render, in order
        main_type: Name of the type rendered into the primary text
        margin: Indentation of the primary text
        alias: Name to declare enums under; simple types are only rendered when set

    Returns:
        The rendered declarations
    """
    inline = ctx.config.nested_placement == NestedPlacement.INLINE
    text = ""
    embed = ""

    for type_def in types:
        if type_def.is_complex:
            if type_def.name == main_type:
                text += render_complex_type(ctx, type_def, margin, alias or type_def.name, is_main=inline)
            else:
                embed += render_complex_type(ctx, type_def, margin + ctx.indent, alias)
        elif alias is not None and get_node(type_def.node, "restriction") is not None:
            text += render_enumeration(ctx, type_def, margin, alias)

    if main_type is None:
        return embed if embed else text

    if inline:
        return _splice(text, embed)
    return text + embed


def _splice(text: str, embed: str) -> str:
    """Replace the nested marker line of ``text`` with ``embed``, or append it."""
    lines = text.splitlines(keepends=True)
    if not any(line.strip() == NESTED_MARKER for line in lines):
        return text + embed
    return "".join(embed if line.strip() == NESTED_MARKER else line for line in lines)
