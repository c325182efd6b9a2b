from openapi_to_http.errors import DiagnosticKind
from openapi_to_http.resolver.security import (
    ApiKeyScheme,
    BearerScheme,
    UnknownScheme,
    parse_scheme,
    resolve_security,
)

SCHEMES = {
    "apiKeyAuth": {"type": "apiKey", "name": "X-Key", "in": "header"},
    "bearerAuth": {"type": "http", "scheme": "bearer"},
    "basicAuth": {"type": "http", "scheme": "basic"},
}


class TestParseScheme:
    def test_api_key(self):
        scheme = parse_scheme(SCHEMES["apiKeyAuth"])
        assert scheme == ApiKeyScheme(name="X-Key", location="header")

    def test_bearer_is_case_insensitive(self):
        assert isinstance(parse_scheme({"type": "http", "scheme": "Bearer"}), BearerScheme)

    def test_other_shapes_are_unknown(self):
        scheme = parse_scheme(SCHEMES["basicAuth"])
        assert isinstance(scheme, UnknownScheme)
        assert scheme.raw["scheme"] == "basic"

    def test_api_key_without_location_is_unknown(self):
        assert isinstance(parse_scheme({"type": "apiKey", "name": "X-Key"}), UnknownScheme)


class TestResolveSecurity:
    def test_api_key_requirement(self):
        scheme, diagnostics = resolve_security([{"apiKeyAuth": []}], SCHEMES)
        assert scheme == ApiKeyScheme(name="X-Key", location="header")
        assert diagnostics == []

    def test_unknown_name_warns_once(self):
        scheme, diagnostics = resolve_security([{"nope": []}], SCHEMES)
        assert scheme is None
        assert len(diagnostics) == 1
        assert diagnostics[0].kind is DiagnosticKind.SECURITY_LOOKUP
        assert "nope" in diagnostics[0].message

    def test_first_requirement_wins(self):
        scheme, _ = resolve_security([{"bearerAuth": []}, {"apiKeyAuth": []}], SCHEMES)
        assert isinstance(scheme, BearerScheme)

    def test_later_requirements_not_consulted_after_miss(self):
        scheme, diagnostics = resolve_security([{"nope": []}, {"bearerAuth": []}], SCHEMES)
        assert scheme is None
        assert len(diagnostics) == 1

    def test_first_key_of_requirement_is_used(self):
        scheme, _ = resolve_security([{"apiKeyAuth": [], "bearerAuth": []}], SCHEMES)
        assert isinstance(scheme, ApiKeyScheme)

    def test_no_requirements(self):
        assert resolve_security([], SCHEMES) == (None, [])

    def test_anonymous_requirement(self):
        assert resolve_security([{}, {"bearerAuth": []}], SCHEMES) == (None, [])

    def test_unknown_scheme_shape_is_returned(self):
        scheme, diagnostics = resolve_security([{"basicAuth": []}], SCHEMES)
        assert isinstance(scheme, UnknownScheme)
        assert diagnostics == []
