"""XSD to C# Code Generator

Generates C# class and enum declarations from XML Schema definitions
(simple types, complex types, sequences, restrictions and extensions),
as used by the FHIR resource schemas.
"""

__version__ = "1.0.0"

from .codegen import CodeGenerator, GenerationResult
from .config import CodeGeneratorConfig, NestedPlacement
from .schema_tree import SchemaLoadError, load_schema, parse_schema
from .writer import AtomicWriter, CodeWriteError

__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "CodeGeneratorConfig",
    "NestedPlacement",
    "SchemaLoadError",
    "load_schema",
    "parse_schema",
    "AtomicWriter",
    "CodeWriteError",
]
