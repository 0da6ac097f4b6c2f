"""
AST node kinds, comment pseudo-nodes and containers.
"""

from gql_compose_core.lib.ast.comment import CommentNode, make_comment_nodes
from gql_compose_core.lib.ast.kinds import (
    DefinitionKind,
    ROOT_TYPES,
    get_definition_kind,
    get_definition_name,
    get_members,
    is_comment,
    is_mergeable_type_definition,
    is_object_type_definition,
    is_schema_definition,
)
from gql_compose_core.lib.ast.list import DefinitionList

__all__ = [
    "CommentNode",
    "DefinitionKind",
    "DefinitionList",
    "ROOT_TYPES",
    "get_definition_kind",
    "get_definition_name",
    "get_members",
    "is_comment",
    "is_mergeable_type_definition",
    "is_object_type_definition",
    "is_schema_definition",
    "make_comment_nodes",
]
