"""Reduce a schema node to the primitive types it can take.

Composition keywords are flattened one level: the result is the union
of the declared type of every member. For allOf this over-approximates
(strict JSON Schema would intersect the members' constraints); the union
is the implemented policy.
"""

from pydantic import TypeAdapter, ValidationError

from openapi_to_http.errors import Diagnostic, DiagnosticKind
from openapi_to_http.parser.base import (
    AllOfSchema,
    AnyOfSchema,
    NotSchema,
    OneOfSchema,
    PrimitiveType,
    SchemaNode,
    SchemaObject,
)

DEFAULT_TYPES = frozenset({PrimitiveType.STRING})

_SCHEMA_ADAPTER = TypeAdapter(SchemaNode)


def resolve_types(node: SchemaNode) -> frozenset[PrimitiveType]:
    """Return the set of primitive types reachable through node."""
    match node:
        case SchemaObject(type=declared):
            return frozenset({declared})
        case (
            AllOfSchema(all_of=members)
            | AnyOfSchema(any_of=members)
            | OneOfSchema(one_of=members)
            | NotSchema(not_=members)
        ):
            return _member_types(members)
    raise TypeError(f"Unsupported schema node: {type(node).__name__}")


def resolve_raw_types(raw: dict | None, owner: str) -> tuple[frozenset[PrimitiveType], list[Diagnostic]]:
    """Resolve an unvalidated schema, such as a parameter's.

    A missing schema means String. A schema that does not fit any known
    shape also falls back to String and is reported.
    """
    if not raw:
        return DEFAULT_TYPES, []
    try:
        node = _SCHEMA_ADAPTER.validate_python(raw)
    except ValidationError:
        return DEFAULT_TYPES, [
            Diagnostic(
                kind=DiagnosticKind.UNSUPPORTED_SHAPE,
                message=f"Unsupported schema for '{owner}', assuming String",
            )
        ]
    return resolve_types(node), []


def _member_types(members: list[SchemaObject]) -> frozenset[PrimitiveType]:
    if not members:
        return DEFAULT_TYPES
    return frozenset(member.type for member in members)

