from pathlib import Path

import pytest

from xsd_to_cs.config import CodeGeneratorConfig
from xsd_to_cs.context import RenderContext
from xsd_to_cs.schema_tree import collect_types, parse_schema

SCHEMA_HEADER = '<xs:schema xmlns:xs="http://www.w3.org/2001/XMLSchema">'
SCHEMA_FOOTER = "</xs:schema>"


def wrap_schema(body: str) -> str:
    return SCHEMA_HEADER + body + SCHEMA_FOOTER


@pytest.fixture
def schema_data_dir() -> Path:
    return Path(__file__).parent / "test_data" / "schemas"


@pytest.fixture
def make_schema():
    """Parse an XSD fragment (the content of xs:schema) into a schema root."""

    def _make(body: str):
        return parse_schema(wrap_schema(body))

    return _make


@pytest.fixture
def make_context(make_schema):
    """Build a render context over an XSD fragment, with "\\n" line endings."""

    def _make(body: str, **config_values) -> RenderContext:
        config_values.setdefault("newline", "\n")
        config = CodeGeneratorConfig(**config_values)
        return RenderContext(config=config, types=collect_types(make_schema(body)))

    return _make
