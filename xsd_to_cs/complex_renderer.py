"""
Rendering of complex types as C# classes.

A complex type becomes either:
- a class, when its content has a sequence of elements. Component types
  ("Outer.Inner") are wrapped in a ``partial class Outer``; root types are
  declared ``partial`` themselves and their fields are cached so subclasses
  can skip fields they would otherwise redeclare.
- an enum, when it only wraps a single attribute whose type is a restricted
  simple type (the usual pattern for coded values).
"""

from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from .context import RenderContext
from .naming import identifier_base, is_list
from .schema_tree import SchemaTypeDefinition, get_node, get_nodes, has_children
from .utils import build_summary, to_title_case

# Insertion point for embedded declarations inside a main class body
NESTED_MARKER = "// <nested>"


@dataclass
class ComplexContent:
    """Structural content of a complex type."""

    base: str | None
    sequence: etree._Element | None
    attribute: etree._Element | None


def find_content(node: etree._Element) -> ComplexContent | None:
    """Locate base type, sequence and attribute of a complex type.

    Looks at ``complexContent/restriction``, then ``complexContent/extension``,
    then a direct ``sequence``. Returns None when none of them is present.
    """
    complex_content = get_node(node, "complexContent")
    for tag in ("restriction", "extension"):
        derivation = get_node(complex_content, tag)
        if derivation is not None:
            return ComplexContent(
                base=derivation.get("base") or None,
                sequence=get_node(derivation, "sequence"),
                attribute=_typed_attribute(derivation),
            )

    sequence = get_node(node, "sequence")
    if sequence is not None:
        return ComplexContent(base=None, sequence=sequence, attribute=_typed_attribute(node))

    return None


def _typed_attribute(node: etree._Element) -> etree._Element | None:
    for attribute in get_nodes(node, "attribute"):
        if attribute.get("type"):
            return attribute
    return None


def render_complex_type(
    ctx: RenderContext,
    type_def: SchemaTypeDefinition,
    margin: str,
    alias: str | None = None,
    is_main: bool = False,
) -> str:
    """Render one complex type; returns an empty string for types without content."""
    content = find_content(type_def.node)
    if content is None:
        ctx.warn(f"Complex type '{type_def.name}' has no restriction, extension or sequence; skipped")
        return ""

    if not has_children(content.sequence):
        return _render_enum_wrapper(ctx, type_def, content, margin)

    return _render_class(ctx, type_def, content, margin, is_main)


def _render_enum_wrapper(ctx: RenderContext, type_def: SchemaTypeDefinition, content: ComplexContent, margin: str) -> str:
    if content.attribute is None:
        return ""

    attribute_type = content.attribute.get("type")
    if attribute_type not in ctx.types:
        # Prefixed names are XSD built-ins
        if ":" not in attribute_type:
            ctx.warn(f"Attribute type '{attribute_type}' of '{type_def.name}' is not defined in the schema")
        return ""

    # Deferred to break the driver <-> renderer import cycle
    from .driver import render_types

    type_content = render_types(
        ctx,
        ctx.types.subset([attribute_type]),
        main_type=attribute_type,
        margin=margin,
        alias=ctx.normalize(type_def.name),
    )
    if not type_content:
        return ""

    return build_summary(type_def.node, margin, ctx.newline) + type_content


def _render_class(
    ctx: RenderContext,
    type_def: SchemaTypeDefinition,
    content: ComplexContent,
    margin: str,
    is_main: bool,
) -> str:
    nl = ctx.newline
    indent = ctx.indent
    name = type_def.name
    base = content.base
    is_component = type_def.is_component

    text = ""
    if is_component:
        text = margin + "public partial class " + identifier_base(name) + nl
        text += margin + "{" + nl
        margin += indent

    class_name = ctx.normalize(name)
    base_fields = ctx.type_cache.get(base)
    class_fields = ctx.type_cache.derive(base)

    text += build_summary(type_def.node, margin, nl)
    text += margin + "public " + ("" if is_component else "partial ") + "class " + class_name
    text += ("" if base is None else " : " + base) + nl
    text += margin + "{" + nl

    member_margin = margin + indent
    for element in get_nodes(content.sequence, "element"):
        element_type = element.get("type")
        if not element_type:
            ctx.warn(f"Element '{element.get('name') or element.get('ref')}' of '{name}' has no type; skipped")
            continue
        if not ctx.is_known_type(element_type):
            ctx.warn(f"Type '{element_type}' used by '{name}' is neither primitive nor defined in the schema")

        property_type = ctx.property_type(element)
        property_name = to_title_case(element.get("name", ""))
        class_fields.add(property_name, property_type)

        # Already declared by the base class
        if base_fields is not None and property_name in base_fields:
            continue

        text += build_summary(element, member_margin, nl)
        if is_list(element):
            text += member_margin + "public List<" + property_type + "> " + property_name + " { get; set; }" + nl
        else:
            text += member_margin + "public " + property_type + " " + property_name + " { get; set; }" + nl
        text += nl

    if is_main:
        text += member_margin + NESTED_MARKER + nl

    text += margin + "}" + nl

    if is_component:
        margin = margin[: -len(indent)]
        text += margin + "}" + nl
    else:
        ctx.type_cache.commit(class_name, class_fields)

    return text
