from xsd_to_cs.complex_renderer import NESTED_MARKER
from xsd_to_cs.config import NestedPlacement
from xsd_to_cs.driver import render_types

SCHEMA = (
    '<xs:simpleType name="Status-list"><xs:restriction base="xs:string">'
    '<xs:enumeration value="active"/>'
    "</xs:restriction></xs:simpleType>"
    '<xs:complexType name="Bundle"><xs:sequence>'
    '<xs:element name="entry" type="Bundle.Entry" maxOccurs="unbounded"/>'
    "</xs:sequence></xs:complexType>"
    '<xs:complexType name="Bundle.Entry"><xs:sequence>'
    '<xs:element name="fullUrl" type="uri" minOccurs="0"/>'
    "</xs:sequence></xs:complexType>"
)

ENTRY = (
    "    public partial class Bundle\n"
    "    {\n"
    "        public class EntryComponent\n"
    "        {\n"
    "            public string FullUrl { get; set; }\n"
    "\n"
    "        }\n"
    "    }\n"
)

BUNDLE = "public partial class Bundle\n{\n    public List<EntryComponent> Entry { get; set; }\n\n"


class TestRenderTypes:
    def test_without_main_type_everything_is_embedded(self, make_context):
        ctx = make_context(SCHEMA)
        text = render_types(ctx, ctx.types)

        assert text.startswith("    public partial class Bundle\n    {\n        public List<EntryComponent> Entry")
        assert text.endswith(ENTRY)
        assert "enum" not in text

    def test_main_type_with_appended_declarations(self, make_context):
        ctx = make_context(SCHEMA)
        text = render_types(ctx, ctx.types, main_type="Bundle")

        assert text == BUNDLE + "}\n" + ENTRY

    def test_main_type_with_inline_declarations(self, make_context):
        ctx = make_context(SCHEMA, nested_placement=NestedPlacement.INLINE)
        text = render_types(ctx, ctx.types, main_type="Bundle")

        assert text == BUNDLE + ENTRY + "}\n"
        assert NESTED_MARKER not in text

    def test_inline_marker_removed_without_embedded_types(self, make_context):
        ctx = make_context(SCHEMA, nested_placement="inline")
        text = render_types(ctx, ctx.types.subset(["Bundle"]), main_type="Bundle")

        assert text == BUNDLE + "}\n"

    def test_simple_types_need_alias(self, make_context):
        ctx = make_context(SCHEMA)
        types = ctx.types.subset(["Status-list"])

        assert render_types(ctx, types) == ""
        assert render_types(ctx, types, main_type="Status-list", alias="Status") == "public enum Status\n{\n    Active\n}\n"

    def test_deterministic(self, make_context):
        first = make_context(SCHEMA)
        second = make_context(SCHEMA)

        assert render_types(first, first.types) == render_types(second, second.types)
