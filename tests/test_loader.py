"""Tests for the loader module."""

import json

import pytest

from apigen.errors import SchemaLoadError, UnresolvableReferenceError
from apigen.loader import get_components, get_paths, get_title, load_spec, resolve_ref

_COMPONENTS: dict = {
    "parameters": {
        "limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}},
        "a/b": {"name": "ab", "in": "query"},
    },
}


class TestLoadSpec:
    """Test reading documents from disk."""

    def test_default_spec(self):
        spec = load_spec()
        assert get_title(spec) == "Swagger Petstore"
        assert "/pet" in get_paths(spec)
        assert "schemas" in get_components(spec)

    def test_json(self, tmp_path):
        path = tmp_path / "api.json"
        path.write_text(json.dumps({"info": {"title": "Json"}, "paths": {}}))
        assert get_title(load_spec(path)) == "Json"

    def test_yaml(self, tmp_path):
        path = tmp_path / "api.yaml"
        path.write_text("info:\n  title: Yaml\npaths: {}\n")
        assert get_title(load_spec(path)) == "Yaml"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as exc:
            load_spec(tmp_path / "nope.json")
        assert "nope.json" in str(exc.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SchemaLoadError):
            load_spec(path)

    def test_empty_sections(self):
        assert get_paths({}) == {}
        assert get_components({"components": None}) == {}
        assert get_title({}) == ""


class TestResolveRef:
    """Test #/components/ pointer resolution."""

    def test_resolves(self):
        param = resolve_ref(_COMPONENTS, "#/components/parameters/limit")
        assert param["name"] == "limit"

    def test_escaped_name(self):
        assert resolve_ref(_COMPONENTS, "#/components/parameters/a~1b")["name"] == "ab"

    def test_missing_entry_is_fatal(self):
        with pytest.raises(UnresolvableReferenceError) as exc:
            resolve_ref(_COMPONENTS, "#/components/parameters/offset")
        assert exc.value.reference == "#/components/parameters/offset"

    def test_missing_category_is_fatal(self):
        with pytest.raises(UnresolvableReferenceError):
            resolve_ref(_COMPONENTS, "#/components/headers/limit")

    def test_external_ref_is_fatal(self):
        with pytest.raises(UnresolvableReferenceError):
            resolve_ref(_COMPONENTS, "other.yaml#/components/parameters/limit")

    def test_malformed_ref_is_fatal(self):
        with pytest.raises(UnresolvableReferenceError):
            resolve_ref(_COMPONENTS, "#/components/parameters")
