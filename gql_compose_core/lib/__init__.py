"""
Core library functionality for merging GraphQL schema documents.
"""

from gql_compose_core.lib.ast import CommentNode, DefinitionKind, DefinitionList
from gql_compose_core.lib.comments import add_comments_to_ast, get_description
from gql_compose_core.lib.loader import load_source, load_sources
from gql_compose_core.lib.merge import MergeOptions, MergeResult, merge_definitions, merge_types
from gql_compose_core.lib.parser import parse_source, parse_sources
from gql_compose_core.lib.printer import print_definitions
from gql_compose_core.lib.schema import make_schema
from gql_compose_core.lib.validate import (
    FieldConflict,
    SchemaConflictError,
    SchemaValidationError,
    find_field_conflicts,
    validate_merged_schema,
)

__all__ = [
    # AST nodes
    "CommentNode",
    "DefinitionKind",
    "DefinitionList",

    # Loading and parsing
    "load_source",
    "load_sources",
    "parse_source",
    "parse_sources",

    # Merging
    "MergeOptions",
    "MergeResult",
    "add_comments_to_ast",
    "get_description",
    "make_schema",
    "merge_definitions",
    "merge_types",
    "print_definitions",

    # Validation
    "FieldConflict",
    "SchemaConflictError",
    "SchemaValidationError",
    "find_field_conflicts",
    "validate_merged_schema",
]
