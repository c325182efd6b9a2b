"""Derive output file and folder names from an endpoint path."""

from pydantic import BaseModel, ConfigDict

from openapi_to_http.errors import PathResolutionError


class PathIdentity(BaseModel):
    """Where the requests of one endpoint are written.

    For "/users/{id}/posts": file_path "/users/posts", file_name "posts",
    folders ["/users"], original_path "/users/{id}/posts".
    Every generated path is rooted at "/".
    """

    model_config = ConfigDict(frozen=True)

    file_path: str
    file_name: str
    folders: tuple[str, ...]
    original_path: str


def is_path_parameter(segment: str) -> bool:
    return segment.startswith("{") and "}" in segment


def resolve_path(raw_path: str) -> PathIdentity:
    """Strip path-parameter segments and build the folder chain."""
    segments = [s for s in raw_path.split("/") if s and not is_path_parameter(s)]
    if not segments:
        raise PathResolutionError(f"Endpoint '{raw_path}' has no segment to name a file after")

    file_path = "/" + "/".join(segments)
    file_name = segments.pop()

    folders = []
    prefix = ""
    for segment in segments:
        prefix = f"{prefix}/{segment}"
        folders.append(prefix)

    return PathIdentity(
        file_path=file_path,
        file_name=file_name,
        folders=tuple(folders),
        original_path=raw_path,
    )
