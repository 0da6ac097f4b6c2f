"""
gql-compose-core: Core library for merging GraphQL schema documents

This package merges SDL documents contributed by several feature modules into one
schema, concatenating root operation type fields and generating a single schema
declaration.
"""

# Import core library functionality
from gql_compose_core.lib import (
    MergeOptions,
    merge_types,
    DefinitionList,
    CommentNode
)

# Import CLI and API interfaces
from gql_compose_core.cli import main
from gql_compose_core.api import app
from gql_compose_core.version import __version__

__all__ = [
    # Core library exports
    "MergeOptions",
    "merge_types",
    "DefinitionList",
    "CommentNode",

    # Interface exports
    "main",
    "app",
    "__version__"
]
