"""
Text utility functions for the XSD to C# generator.
"""

from lxml import etree

from .schema_tree import get_documentation


def to_title_case(text: str) -> str:
    """Convert a hyphenated schema name or value to PascalCase.

    Only the first character of each hyphen-separated segment is touched.

    Examples:
        "entered-in-error" -> "EnteredInError"
        "active" -> "Active"
        "valueString" -> "ValueString"
    """
    return "".join(segment[:1].upper() + segment[1:] for segment in text.split("-"))


def build_summary(element: etree._Element | None, margin: str, newline: str = "\r\n") -> str:
    """Render the documentation of ``element`` as a C# ``/// <summary>`` block.

    Returns an empty string when the element carries no documentation.
    """
    lines = get_documentation(element)
    if not lines:
        return ""

    summary = margin + "/// <summary>" + newline
    for line in lines:
        summary += margin + "/// " + line + newline
    summary += margin + "/// </summary>" + newline
    return summary
