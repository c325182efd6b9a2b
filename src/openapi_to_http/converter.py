"""Conversion pipeline: OpenAPI document -> .http documents."""

import logging
from typing import Protocol, TypeVar

from pydantic import BaseModel

from openapi_to_http.errors import Diagnostic
from openapi_to_http.generator.aggregator import FileAggregator, OutputDocument
from openapi_to_http.generator.descriptor import build_descriptor
from openapi_to_http.generator.formatter import format_block
from openapi_to_http.parser.base import OpenApiDocument
from openapi_to_http.resolver.names import resolve_path

logger = logging.getLogger(__name__)


T_co = TypeVar("T_co", covariant=True)


class DocumentWriter(Protocol[T_co]):
    """What the pipeline needs from the filesystem side; T_co is what a write returns."""

    def ensure_folder(self, path: str) -> object: ...

    def write_document(self, path: str, content: str) -> T_co: ...


class ConversionResult(BaseModel):
    documents: list[OutputDocument]
    folders: list[str]
    diagnostics: list[Diagnostic] = []
    endpoint_count: int = 0
    operation_count: int = 0


def convert(document: OpenApiDocument) -> ConversionResult:
    """Resolve every endpoint and operation, then aggregate into documents.

    Raises PathResolutionError when an endpoint path has no usable segment.
    """
    aggregator = FileAggregator()
    diagnostics: list[Diagnostic] = []
    operation_count = 0

    for raw_path, item in document.paths.items():
        identity = resolve_path(raw_path)
        for method, operation in item.operations.items():
            descriptor, found = build_descriptor(
                identity,
                operation,
                method,
                document.components,
                inherited_parameters=item.parameters,
                default_security=document.security,
            )
            diagnostics.extend(found)
            aggregator.add(identity, format_block(descriptor))
            operation_count += 1

    documents, folders = aggregator.build()
    logger.debug("Aggregated %d operations into %d documents", operation_count, len(documents))
    return ConversionResult(
        documents=documents,
        folders=folders,
        diagnostics=diagnostics,
        endpoint_count=len(document.paths),
        operation_count=operation_count,
    )


def write_result(result: ConversionResult, writer: DocumentWriter[T_co]) -> list[T_co]:
    """Create folders, then write every document. Returns what the writer returned per document."""
    for folder in result.folders:
        writer.ensure_folder(folder)
    return [writer.write_document(doc.path, doc.content) for doc in result.documents]
