"""
Render context shared by the driver and the type renderers.

One context is created per generation run. It owns the run's type cache and
collects the diagnostics for everything the renderers silently skip.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lxml import etree

from .config import CodeGeneratorConfig
from .naming import normalize_identifier, property_type
from .schema_tree import SchemaTypes
from .type_cache import TypeCache

logger = logging.getLogger(__name__)


@dataclass
class RenderContext:
    """State for one generation run."""

    config: CodeGeneratorConfig
    types: SchemaTypes
    type_cache: TypeCache = field(default_factory=TypeCache)
    warnings: list[str] = field(default_factory=list)

    def __post_init__(self):
        self._type_table = self.config.type_table

    @property
    def indent(self) -> str:
        return self.config.indent

    @property
    def newline(self) -> str:
        return self.config.newline

    def normalize(self, name: str) -> str:
        return normalize_identifier(name, self.config.type_renames, self.config.component_suffix)

    def property_type(self, element: etree._Element) -> str:
        return property_type(element, self.config.type_renames, self._type_table, self.config.component_suffix)

    def is_known_type(self, type_name: str) -> bool:
        """Whether a field type is a primitive or a type defined in this schema."""
        return type_name in self.types or self.normalize(type_name) in self._type_table

    def warn(self, message: str) -> None:
        """Record a diagnostic; repeated messages are only kept once."""
        if message in self.warnings:
            return
        logger.warning(message)
        self.warnings.append(message)
