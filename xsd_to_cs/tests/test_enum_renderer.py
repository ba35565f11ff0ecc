import pytest

from xsd_to_cs.enum_renderer import enum_member_name, render_enumeration

STATUS = (
    '<xs:simpleType name="Status">'
    '<xs:restriction base="xs:string">'
    '<xs:enumeration value="active"/>'
    '<xs:enumeration value="entered-in-error"/>'
    "</xs:restriction>"
    "</xs:simpleType>"
)


class TestMemberNames:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("=", "Equal"),
            (">", "GreaterThan"),
            (">=", "GreaterOrEqual"),
            ("<", "LessThan"),
            ("<=", "LessOrEqual"),
            ("active", "Active"),
            ("entered-in-error", "EnteredInError"),
        ],
    )
    def test_member_name(self, value, expected):
        assert enum_member_name(value) == expected

    def test_values_with_digits_get_prefix(self):
        assert enum_member_name("4.0.1") == "N4.0.1"
        assert enum_member_name("v2-style") == "Nv2-style"


class TestRenderEnumeration:
    def test_status_enum(self, make_context):
        ctx = make_context(STATUS)
        text = render_enumeration(ctx, ctx.types.get("Status"), "")

        assert text == "public enum Status\n{\n    Active,\n    EnteredInError\n}\n"

    def test_alias_and_margin(self, make_context):
        ctx = make_context(STATUS)
        text = render_enumeration(ctx, ctx.types.get("Status"), "    ", alias="PatientStatus")

        assert text.startswith("    public enum PatientStatus\n    {\n")
        assert text.endswith("        EnteredInError\n    }\n")

    def test_documentation(self, make_context):
        ctx = make_context(
            '<xs:simpleType name="Gender">'
            "<xs:annotation><xs:documentation>Gender of a person</xs:documentation></xs:annotation>"
            '<xs:restriction base="xs:string">'
            '<xs:enumeration value="male"><xs:annotation><xs:documentation>Male</xs:documentation></xs:annotation></xs:enumeration>'
            '<xs:enumeration value="female"/>'
            "</xs:restriction>"
            "</xs:simpleType>"
        )
        text = render_enumeration(ctx, ctx.types.get("Gender"), "")

        assert text == (
            "/// <summary>\n"
            "/// Gender of a person\n"
            "/// </summary>\n"
            "public enum Gender\n"
            "{\n"
            "    /// <summary>\n"
            "    /// Male\n"
            "    /// </summary>\n"
            "    Male,\n"
            "    Female\n"
            "}\n"
        )

    def test_no_values(self, make_context):
        ctx = make_context('<xs:simpleType name="code-primitive"><xs:restriction base="xs:token"/></xs:simpleType>')
        assert render_enumeration(ctx, ctx.types.get("code-primitive"), "") == ""

    def test_crlf_line_endings(self, make_context):
        ctx = make_context(STATUS, newline="\r\n")
        text = render_enumeration(ctx, ctx.types.get("Status"), "")
        assert text == "public enum Status\r\n{\r\n    Active,\r\n    EnteredInError\r\n}\r\n"
