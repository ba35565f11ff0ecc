"""
Configuration for the XSD to C# generator.

Defaults reproduce the FHIR entity output layout: CRLF line endings,
four-space indentation and the ``Efferent.FHIR.Entities`` namespace.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path

from .naming import COMPONENT_SUFFIX, PRIMITIVE_TYPES, TYPE_RENAMES


class NestedPlacement(str, Enum):
    """Where embedded type declarations go when a main type is designated."""

    APPEND = "append"  # After the main type's declaration
    INLINE = "inline"  # Inside the main class body, before its closing brace


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # C# namespace wrapping all generated declarations
    namespace: str = "Efferent.FHIR.Entities"

    # Namespaces emitted as using directives, in order
    usings: list[str] = field(default_factory=lambda: ["System", "System.Collections.Generic"])

    indent: str = "    "
    newline: str = "\r\n"

    # Type rendered directly into the primary output (None = render every type as embedded)
    main_type: str | None = None

    nested_placement: NestedPlacement = NestedPlacement.APPEND

    # Renamed identifiers, applied after normalization
    type_renames: dict[str, str] = field(default_factory=lambda: dict(TYPE_RENAMES))

    # Additions or overrides to the primitive type table
    primitive_types: dict[str, str] = field(default_factory=dict)

    component_suffix: str = COMPONENT_SUFFIX

    # Add "// Generated by ..." comment at top of file
    add_generation_comment: bool = False

    # Default locations used by the command line when no paths are given
    source_dir: str = "./fhir-codegen-xsd/"
    dest_dir: str = "./generated/"
    input_file: str = "fhir-single.xsd"

    def __post_init__(self):
        self.nested_placement = NestedPlacement(self.nested_placement)
        if self.newline not in ("\n", "\r\n", "\r"):
            raise ValueError(f"Unsupported newline sequence: {self.newline!r}")

    @property
    def type_table(self) -> dict[str, str]:
        """Primitive type table with configured overrides applied."""
        return {**PRIMITIVE_TYPES, **self.primitive_types}

    def output_name(self, input_name: str) -> str:
        return input_name.replace(".xsd", ".cs")

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(CodeGeneratorConfig)}
        return CodeGeneratorConfig(**{k: v for k, v in d.items() if k in known})

    @staticmethod
    def from_file(path: str | Path) -> CodeGeneratorConfig:
        with open(path) as f:
            return CodeGeneratorConfig.from_dict(json.load(f))

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "namespace": self.namespace,
            "usings": list(self.usings),
            "indent": self.indent,
            "newline": self.newline,
            "main_type": self.main_type,
            "nested_placement": self.nested_placement.value,
            "type_renames": dict(self.type_renames),
            "primitive_types": dict(self.primitive_types),
            "component_suffix": self.component_suffix,
            "add_generation_comment": self.add_generation_comment,
            "source_dir": self.source_dir,
            "dest_dir": self.dest_dir,
            "input_file": self.input_file,
        }
