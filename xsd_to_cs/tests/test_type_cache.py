import pytest

from xsd_to_cs.type_cache import FieldSet, TypeCache


class TestTypeCache:
    def test_derive_without_base(self):
        cache = TypeCache()
        fields = cache.derive(None)
        assert len(fields) == 0

    def test_derive_from_uncached_base(self):
        cache = TypeCache()
        assert dict(cache.derive("Element")) == {}

    def test_subclass_overlays_base(self):
        cache = TypeCache()
        base = cache.derive(None)
        base.add("Id", "string")
        cache.commit("Element", base)

        child = cache.derive("Element")
        child.add("Name", "HumanName")
        cache.commit("Patient", child)

        assert dict(cache.get("Patient")) == {"Id": "string", "Name": "HumanName"}
        assert dict(cache.get("Element")) == {"Id": "string"}
        assert dict(child.own_fields()) == {"Name": "HumanName"}

    def test_own_field_shadows_base(self):
        cache = TypeCache()
        base = cache.derive(None)
        base.add("Value", "string")
        cache.commit("Base", base)

        child = cache.derive("Base")
        child.add("Value", "int")

        assert child["Value"] == "int"
        assert cache.get("Base")["Value"] == "string"

    def test_snapshots_are_read_only(self):
        cache = TypeCache()
        fields = FieldSet()
        fields.add("Id", "string")
        cache.commit("Element", fields)

        with pytest.raises(TypeError):
            cache.get("Element")["Id"] = "int"

    def test_names_and_clear(self):
        cache = TypeCache()
        cache.commit("A", FieldSet())
        cache.commit("B", FieldSet())

        assert cache.names() == ["A", "B"]
        assert "A" in cache
        cache.clear()
        assert len(cache) == 0
        assert cache.get(None) is None
