"""
Single entry point for SDL parsing using graphql-core.
"""

import logging
from typing import Iterable, List, Union

from graphql import parse
from graphql.language import DocumentNode

SchemaSource = Union[str, DocumentNode]


def parse_source(source: SchemaSource) -> DocumentNode:
    """
    Return the document for a schema source.

    Text is parsed with graphql.parse; a GraphQLSyntaxError for malformed SDL is
    not caught here. Pre-parsed documents are returned unchanged.
    """
    if isinstance(source, DocumentNode):
        return source
    if isinstance(source, str):
        return parse(source)
    raise TypeError(f"Schema source must be SDL text or a DocumentNode, got {type(source).__name__}")


def parse_sources(sources: Iterable[SchemaSource]) -> List[DocumentNode]:
    """Parse every source, preserving order."""
    return [parse_source(source) for source in sources]


def extract_definitions(sources: Iterable[SchemaSource]) -> list:
    """Flatten the definitions of all sources into one list, in source order."""
    definitions = []
    for index, document in enumerate(parse_sources(sources)):
        logging.debug(f"Source {index}: {len(document.definitions)} definitions")
        definitions.extend(document.definitions)
    return definitions


__all__ = [
    "SchemaSource",
    "extract_definitions",
    "parse_source",
    "parse_sources",
]
