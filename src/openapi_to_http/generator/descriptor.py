"""Build the normalized request description of one operation."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from openapi_to_http.config import BEARER_AUTH_LINE
from openapi_to_http.errors import Diagnostic, DiagnosticKind
from openapi_to_http.parser.base import (
    JSON_MEDIA_TYPE,
    Components,
    HttpMethod,
    Operation,
    Parameter,
    PrimitiveType,
    RequestBody,
)
from openapi_to_http.resolver.names import PathIdentity
from openapi_to_http.resolver.schema import resolve_raw_types
from openapi_to_http.resolver.security import ApiKeyScheme, BearerScheme, UnknownScheme, resolve_security

logger = logging.getLogger(__name__)

COMPOSITION_KEYS = ("allOf", "anyOf", "oneOf")


class ParameterDescriptor(BaseModel):
    """One documented input of a request."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str  # query / path / body, or the api key location for security
    required: bool | None = None  # None: not stated in the document
    default: Any = None
    types: frozenset[PrimitiveType] = frozenset({PrimitiveType.STRING})


class OperationDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str  # original endpoint path, parameters kept
    content_type: str | None = None
    auth: str | None = None  # full header line
    query: tuple[ParameterDescriptor, ...] = ()
    path_params: tuple[ParameterDescriptor, ...] = ()
    body: tuple[ParameterDescriptor, ...] = ()
    security: tuple[ParameterDescriptor, ...] = ()


def build_descriptor(
    identity: PathIdentity,
    operation: Operation,
    method: HttpMethod,
    components: Components,
    inherited_parameters: list[Parameter] | None = None,
    default_security: list[dict[str, list[str]]] | None = None,
) -> tuple[OperationDescriptor, list[Diagnostic]]:
    """Combine parameters, request body and security of an operation.

    Path-item parameters are inherited unless the operation redeclares
    the same (name, in) pair. Operations without their own security list
    fall back to the document-level one.
    """
    diagnostics: list[Diagnostic] = []
    where = f"{method.value} {identity.original_path}"

    query, path_params = [], []
    for param in _merge_parameters(inherited_parameters or [], operation.parameters):
        if param.location not in ("query", "path"):
            continue
        types, found = resolve_raw_types(param.schema_, owner=f"{where} {param.name}")
        diagnostics.extend(found)
        descriptor = ParameterDescriptor(
            name=param.name,
            location=param.location,
            required=param.required,
            default=param.default,
            types=types,
        )
        (query if param.location == "query" else path_params).append(descriptor)

    content_type = None
    body: list[ParameterDescriptor] = []
    if operation.request_body is not None:
        content_type, body, found = _resolve_body(operation.request_body, where)
        diagnostics.extend(found)

    requirements = operation.security if operation.security is not None else (default_security or [])
    scheme, found = resolve_security(requirements, components.security_schemes)
    diagnostics.extend(found)

    auth = None
    security: list[ParameterDescriptor] = []
    if isinstance(scheme, BearerScheme):
        auth = BEARER_AUTH_LINE
    elif isinstance(scheme, ApiKeyScheme):
        security.append(ParameterDescriptor(name=scheme.name, location=scheme.location, required=True))
    elif isinstance(scheme, UnknownScheme):
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.UNSUPPORTED_SHAPE,
                message=f"{where}: security scheme of type '{scheme.raw.get('type')}' is not supported, skipped",
            )
        )

    logger.debug("Built descriptor for %s", where)
    descriptor = OperationDescriptor(
        method=method,
        path=identity.original_path,
        content_type=content_type,
        auth=auth,
        query=tuple(query),
        path_params=tuple(path_params),
        body=tuple(body),
        security=tuple(security),
    )
    return descriptor, diagnostics


def _merge_parameters(inherited: list[Parameter], own: list[Parameter]) -> list[Parameter]:
    merged = {(p.name, p.location): p for p in inherited}
    for param in own:
        merged[(param.name, param.location)] = param
    return list(merged.values())


def _resolve_body(
    request_body: RequestBody, where: str
) -> tuple[str | None, list[ParameterDescriptor], list[Diagnostic]]:
    if request_body.json_content is None:
        if not request_body.content:
            return None, [], []
        media_types = ", ".join(request_body.content)
        return None, [], [
            Diagnostic(
                kind=DiagnosticKind.UNSUPPORTED_SHAPE,
                message=f"{where}: request body media type {media_types} is not supported, skipped",
            )
        ]

    schema = request_body.json_content.schema_
    if schema is None:
        return JSON_MEDIA_TYPE, [], []
    params, diagnostics = _body_parameters(schema, where)
    return JSON_MEDIA_TYPE, params, diagnostics


def _body_parameters(schema: dict, where: str) -> tuple[list[ParameterDescriptor], list[Diagnostic]]:
    """Turn the top-level properties of a body schema into parameters.

    Composed bodies contribute the properties of each member; the first
    declaration of a property name wins. A property whose schema cannot
    be typed is listed as String and reported.
    """
    members = [schema]
    for key in COMPOSITION_KEYS:
        if isinstance(schema.get(key), list):
            members = [m for m in schema[key] if isinstance(m, dict)]
            break

    params: dict[str, ParameterDescriptor] = {}
    diagnostics: list[Diagnostic] = []
    for member in members:
        properties = member.get("properties")
        if not isinstance(properties, dict):
            continue
        required = member.get("required")
        required = set(required) if isinstance(required, list) else set()
        for name, prop in properties.items():
            if name in params:
                continue
            raw = prop if isinstance(prop, dict) else None
            types, found = resolve_raw_types(raw, owner=f"{where} body {name}")
            diagnostics.extend(found)
            params[name] = ParameterDescriptor(
                name=name,
                location="body",
                required=name in required,
                types=types,
            )
    return list(params.values()), diagnostics
