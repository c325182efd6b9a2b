"""OpenAPI document loader.

Reads a JSON or YAML OpenAPI document into an OpenApiDocument.
Any structural problem is reported as an InputError.
"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from openapi_to_http.errors import InputError

from .base import OpenApiDocument


def parse_openapi(file_path: Path) -> OpenApiDocument:
    """Parse an OpenAPI file.

    YAML is tried first since it also reads most JSON; JSON the YAML
    scanner rejects (tab indentation) is read with the json module.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputError(f"Schema file was not found at {file_path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Schema file {file_path} could not be read: {e}") from e

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as yaml_error:
        try:
            doc = json.loads(text)
        except json.JSONDecodeError:
            raise InputError(
                f"Schema file {file_path} is not valid JSON or YAML: {_first_line(yaml_error)}"
            ) from yaml_error

    return load_openapi(doc, source=str(file_path))


def load_openapi(doc: object, source: str = "<document>") -> OpenApiDocument:
    """Validate an already decoded document."""
    if not isinstance(doc, dict):
        raise InputError(f"Schema {source} must be a mapping at the top level")
    try:
        return OpenApiDocument.model_validate(doc)
    except ValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise InputError(f"Schema {source} is invalid at {location}: {error['msg']}") from e


def _first_line(error: Exception) -> str:
    return str(error).splitlines()[0]
