from pathlib import Path

import pytest

from cfgutil.exceptions import InputError, SpecParseError
from cfgutil.parser.openapi import parse_document, parse_openapi

FIXTURES = Path(__file__).parent / "fixtures"


class TestOpenApiParser:
    def test_parse_title(self):
        api = parse_openapi(FIXTURES / "petstore.yaml")
        assert api.title == "Swagger Petstore"

    def test_parse_paths_and_methods(self):
        api = parse_openapi(FIXTURES / "petstore.yaml")
        assert set(api.paths) == {"/pets", "/pets/{petId}"}
        assert set(api.paths["/pets"]) == {"get", "post"}
        assert set(api.paths["/pets/{petId}"]) == {"get", "delete"}

    def test_parse_optional_param(self):
        api = parse_openapi(FIXTURES / "petstore.yaml")
        limit = api.paths["/pets"]["get"][0]
        assert limit.name == "limit"
        assert limit.required is False

    def test_path_level_params_apply_to_every_operation(self):
        api = parse_openapi(FIXTURES / "petstore.yaml")
        for method in ("get", "delete"):
            names = [p.name for p in api.paths["/pets/{petId}"][method]]
            assert names[0] == "petId"

    def test_path_params_are_required(self):
        api = parse_openapi(FIXTURES / "petstore.yaml")
        pet_id = api.paths["/pets/{petId}"]["get"][0]
        assert pet_id.location == "path"
        assert pet_id.required is True

    def test_resolves_component_ref(self):
        api = parse_openapi(FIXTURES / "petstore.yaml")
        trace = api.paths["/pets"]["post"][0]
        assert trace.name == "X-Trace-Id"
        assert trace.location == "header"
        assert trace.required is True

    def test_parse_json(self):
        api = parse_openapi(FIXTURES / "myapi.json")
        assert api.title == "My API"
        assert api.paths["/acct"]["get"][0].name == "accountId"


class TestParseDocument:
    def test_operation_overrides_path_param(self):
        doc = {
            "paths": {
                "/a": {
                    "parameters": [{"name": "x", "in": "query", "required": False}],
                    "get": {"parameters": [{"name": "x", "in": "query", "required": True}]},
                }
            }
        }
        api = parse_document(doc)
        params = api.paths["/a"]["get"]
        assert len(params) == 1
        assert params[0].required is True

    def test_swagger2_ref(self):
        doc = {
            "swagger": "2.0",
            "info": {"title": "Old"},
            "parameters": {"Id": {"name": "id", "in": "query", "required": True}},
            "paths": {"/a": {"get": {"parameters": [{"$ref": "#/parameters/Id"}]}}},
        }
        api = parse_document(doc)
        assert api.paths["/a"]["get"][0].name == "id"

    def test_ignores_non_method_keys(self):
        doc = {"paths": {"/a": {"summary": "x", "get": {}}}}
        api = parse_document(doc)
        assert api.paths == {"/a": {"get": []}}

    def test_missing_title(self):
        assert parse_document({"paths": {}}).title == ""

    def test_not_a_mapping(self):
        with pytest.raises(SpecParseError):
            parse_document(["not", "a", "spec"])

    def test_unresolvable_ref(self):
        doc = {"paths": {"/a": {"get": {"parameters": [{"$ref": "#/components/parameters/Nope"}]}}}}
        with pytest.raises(SpecParseError, match="Nope"):
            parse_document(doc)

    def test_parameter_without_name(self):
        doc = {"paths": {"/a": {"get": {"parameters": [{"in": "query"}]}}}}
        with pytest.raises(SpecParseError):
            parse_document(doc)


class TestParseErrors:
    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError):
            parse_openapi(tmp_path / "missing.json")

    def test_syntax_error(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text('{"openapi": [unclosed', encoding="utf-8")
        with pytest.raises(SpecParseError):
            parse_openapi(f)


class TestNullsAndFlags:
    def test_null_title_is_empty(self, tmp_path):
        f = tmp_path / "api.yaml"
        f.write_text("info:\n  title:\npaths: {}\n", encoding="utf-8")
        assert parse_openapi(f).title == ""

    def test_null_name_is_empty(self):
        doc = {"paths": {"/a": {"get": {"parameters": [{"name": None, "required": True}]}}}}
        assert parse_document(doc).paths["/a"]["get"][0].name == ""

    def test_string_required_flag(self):
        doc = {
            "paths": {
                "/a": {
                    "get": {
                        "parameters": [
                            {"name": "x", "required": "false"},
                            {"name": "y", "required": "true"},
                        ]
                    }
                }
            }
        }
        params = parse_document(doc).paths["/a"]["get"]
        assert params[0].required is False
        assert params[1].required is True
