from pydantic import TypeAdapter

from openapi_to_http.errors import DiagnosticKind
from openapi_to_http.parser.base import PrimitiveType, SchemaNode
from openapi_to_http.resolver.schema import resolve_raw_types, resolve_types

ADAPTER = TypeAdapter(SchemaNode)


def _types(raw: dict) -> frozenset:
    return resolve_types(ADAPTER.validate_python(raw))


class TestResolveTypes:
    def test_object_gives_declared_type(self):
        assert _types({"type": "boolean"}) == {PrimitiveType.BOOLEAN}

    def test_one_of_unions_members(self):
        assert _types({"oneOf": [{"type": "string"}, {"type": "integer"}]}) == {
            PrimitiveType.STRING,
            PrimitiveType.INTEGER,
        }

    def test_all_of_unions_instead_of_intersecting(self):
        result = _types({"allOf": [{"type": "object"}, {"type": "array"}]})
        assert result == {PrimitiveType.OBJECT, PrimitiveType.ARRAY}

    def test_any_of_deduplicates(self):
        assert _types({"anyOf": [{"type": "number"}, {"type": "number"}]}) == {PrimitiveType.NUMBER}

    def test_not_lists_member_types(self):
        assert _types({"not": {"type": "string"}}) == {PrimitiveType.STRING}

    def test_nested_properties_do_not_contribute(self):
        schema = {"type": "object", "properties": {"id": {"type": "integer"}}}
        assert _types(schema) == {PrimitiveType.OBJECT}

    def test_empty_composition_is_never_empty(self):
        assert _types({"oneOf": []}) == {PrimitiveType.STRING}


class TestResolveRawTypes:
    def test_missing_schema_is_string(self):
        types, diagnostics = resolve_raw_types(None, owner="id")
        assert types == {PrimitiveType.STRING}
        assert diagnostics == []

    def test_typed_schema(self):
        types, diagnostics = resolve_raw_types({"type": "integer", "format": "int64"}, owner="id")
        assert types == {PrimitiveType.INTEGER}
        assert diagnostics == []

    def test_unknown_shape_falls_back_with_warning(self):
        types, diagnostics = resolve_raw_types({"$ref": "#/components/schemas/Id"}, owner="GET /a id")
        assert types == {PrimitiveType.STRING}
        assert len(diagnostics) == 1
        assert diagnostics[0].kind is DiagnosticKind.UNSUPPORTED_SHAPE
        assert "GET /a id" in diagnostics[0].message
