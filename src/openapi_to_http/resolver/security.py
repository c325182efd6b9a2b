"""Security scheme matching.

An operation lists security requirements, each mapping a scheme name to
its scopes. The first requirement decides: its first scheme name is
looked up in components.securitySchemes and later requirements are
never consulted.
"""

import logging
from typing import Literal, Union

from pydantic import BaseModel

from openapi_to_http.errors import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)


class ApiKeyScheme(BaseModel):
    kind: Literal["api_key"] = "api_key"
    name: str
    location: str  # header / query / cookie


class BearerScheme(BaseModel):
    kind: Literal["bearer"] = "bearer"


class UnknownScheme(BaseModel):
    """A declared scheme whose shape is not rendered yet."""

    kind: Literal["unknown"] = "unknown"
    raw: dict


SecurityScheme = Union[ApiKeyScheme, BearerScheme, UnknownScheme]


def parse_scheme(raw: dict) -> SecurityScheme:
    """Classify a raw components.securitySchemes entry."""
    scheme_type = raw.get("type")
    if scheme_type == "apiKey" and raw.get("name") and raw.get("in"):
        return ApiKeyScheme(name=raw["name"], location=raw["in"])
    if scheme_type == "http" and str(raw.get("scheme", "")).lower() == "bearer":
        return BearerScheme()
    return UnknownScheme(raw=raw)


def resolve_security(
    requirements: list[dict[str, list[str]]],
    schemes: dict[str, dict],
) -> tuple[SecurityScheme | None, list[Diagnostic]]:
    """Pick the scheme an operation authenticates with.

    Returns (scheme, diagnostics). The scheme is None when there are no
    requirements, when the first requirement is empty (anonymous access)
    or when it names a scheme that is not declared; only the last case
    produces a diagnostic.
    """
    for requirement in requirements:
        if not requirement:
            return None, []
        name = next(iter(requirement))
        if name not in schemes:
            return None, [
                Diagnostic(
                    kind=DiagnosticKind.SECURITY_LOOKUP,
                    message=f"Security scheme '{name}' is not declared in components.securitySchemes",
                )
            ]
        scheme = parse_scheme(schemes[name])
        logger.debug("Resolved security scheme %s as %s", name, scheme.kind)
        return scheme, []
    return None, []
