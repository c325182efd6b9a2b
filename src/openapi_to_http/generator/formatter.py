"""Render operation descriptors as .http request blocks.

A block looks like:

    # Query
    #  - limit?: Integer
    #
    GET /pets
    Host: {{HTTP_HOST}}
"""

from openapi_to_http.config import HOST_LINE
from openapi_to_http.generator.descriptor import OperationDescriptor, ParameterDescriptor
from openapi_to_http.parser.base import HttpMethod, PrimitiveType

TYPE_ORDER = list(PrimitiveType)


def format_parameter(param: ParameterDescriptor) -> str:
    """'name: Types', with '?' after the name when it is explicitly optional."""
    name = param.name + "?" if param.required is False else param.name
    types = sorted(param.types, key=TYPE_ORDER.index)
    return f"{name}: {','.join(t.label for t in types)}"


def format_comments(descriptor: OperationDescriptor) -> str:
    sections = (
        ("Query", descriptor.query),
        ("Parameters", descriptor.path_params),
        ("Body", descriptor.body),
        ("Security", descriptor.security),
    )
    output = []
    for title, params in sections:
        if not params:
            continue
        lines = "".join(f"#  - {format_parameter(p)}\n" for p in params)
        output.append(f"# {title}\n{lines}#")
    return "\n".join(output)


def format_block(descriptor: OperationDescriptor) -> str:
    """Render one operation; absent optional parts just drop their line."""
    output = []

    comments = format_comments(descriptor)
    if comments:
        output.append(comments)

    output.append(f"{descriptor.method.value} {descriptor.path}")
    output.append(HOST_LINE)

    if descriptor.content_type:
        output.append(f"Content-Type: {descriptor.content_type}")
    if descriptor.auth:
        output.append(descriptor.auth)

    return "\n".join(output)


def parse_request_line(block: str) -> tuple[HttpMethod, str]:
    """Recover the method and endpoint path from a rendered block."""
    for line in block.splitlines():
        if not line.strip() or line.startswith("#"):
            continue
        method, _, path = line.partition(" ")
        return HttpMethod(method), path
    raise ValueError("Block has no request line")
