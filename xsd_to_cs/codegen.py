"""
C# code generation from an XSD schema.

Collects the schema's named types, renders them through the type graph
driver and wraps the result in the file prefix (using directives and
namespace) and suffix templates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import jinja2
from lxml import etree

from . import __version__
from .config import CodeGeneratorConfig
from .context import RenderContext
from .driver import render_types
from .schema_tree import collect_types, load_schema

CURRENT_DIR = Path(__file__).parent.resolve().absolute()

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Generated file content and the diagnostics collected while rendering."""

    text: str
    warnings: list[str] = field(default_factory=list)
    class_names: list[str] = field(default_factory=list)


class CodeGenerator:
    def __init__(self, schema: etree._Element, config: CodeGeneratorConfig | None = None, command_line: str | None = None):
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.command_line = command_line

        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(CURRENT_DIR / "templates" / "cs")),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            newline_sequence=self.config.newline,
        )
        self.prefix = self.jinja_env.get_template("prefix.cs.jinja2")
        self.suffix = self.jinja_env.get_template("suffix.cs.jinja2")

    @classmethod
    def from_file(cls, path: str | Path, config: CodeGeneratorConfig | None = None, command_line: str | None = None) -> CodeGenerator:
        return cls(load_schema(path), config, command_line)

    def generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        comment = f"Generated by xsd_to_cs {__version__}"
        if self.command_line:
            comment += f": {self.command_line}"
        return comment

    def render(self) -> GenerationResult:
        """Render the schema and return the full file content with diagnostics."""
        types = collect_types(self.schema)
        ctx = RenderContext(config=self.config, types=types)
        logger.debug("Rendering %d schema types", len(types))

        body = render_types(ctx, types, main_type=self.config.main_type)

        text = self.prefix.render(
            generation_comment=self.generation_comment(),
            usings=self.config.usings,
            namespace=self.config.namespace,
        )
        text += body
        text += self.suffix.render()

        return GenerationResult(text=text, warnings=list(ctx.warnings), class_names=sorted(ctx.type_cache.names()))

    def generate(self) -> str:
        return self.render().text
