from enum import Enum
from typing import Dict, Iterable, Optional, Type

from graphql.language import ast as gql_ast

from gql_compose_core.lib.ast.comment import CommentNode


class DefinitionKind(Enum):
    """Enumeration of the node kinds the merge engine distinguishes."""
    SCHEMA = "schema"
    SCHEMA_EXTENSION = "schema_extension"
    OBJECT_TYPE = "object_type"
    INTERFACE_TYPE = "interface_type"
    INPUT_OBJECT_TYPE = "input_object_type"
    ENUM_TYPE = "enum_type"
    UNION_TYPE = "union_type"
    SCALAR_TYPE = "scalar_type"
    DIRECTIVE = "directive"
    TYPE_EXTENSION = "type_extension"
    EXECUTABLE = "executable"
    COMMENT = "comment"
    UNKNOWN = "unknown"


# First match wins, so extension classes are listed before definition classes.
_KIND_BY_NODE_CLASS: Dict[Type, DefinitionKind] = {
    CommentNode: DefinitionKind.COMMENT,
    gql_ast.SchemaExtensionNode: DefinitionKind.SCHEMA_EXTENSION,
    gql_ast.TypeExtensionNode: DefinitionKind.TYPE_EXTENSION,
    gql_ast.SchemaDefinitionNode: DefinitionKind.SCHEMA,
    gql_ast.ObjectTypeDefinitionNode: DefinitionKind.OBJECT_TYPE,
    gql_ast.InterfaceTypeDefinitionNode: DefinitionKind.INTERFACE_TYPE,
    gql_ast.InputObjectTypeDefinitionNode: DefinitionKind.INPUT_OBJECT_TYPE,
    gql_ast.EnumTypeDefinitionNode: DefinitionKind.ENUM_TYPE,
    gql_ast.UnionTypeDefinitionNode: DefinitionKind.UNION_TYPE,
    gql_ast.ScalarTypeDefinitionNode: DefinitionKind.SCALAR_TYPE,
    gql_ast.DirectiveDefinitionNode: DefinitionKind.DIRECTIVE,
    gql_ast.ExecutableDefinitionNode: DefinitionKind.EXECUTABLE,
}

# Kinds whose members (fields, input fields or enum values) get comment rewriting.
MEMBER_ATTRIBUTE: Dict[DefinitionKind, str] = {
    DefinitionKind.OBJECT_TYPE: "fields",
    DefinitionKind.INTERFACE_TYPE: "fields",
    DefinitionKind.INPUT_OBJECT_TYPE: "fields",
    DefinitionKind.ENUM_TYPE: "values",
}

ROOT_TYPES: Dict[str, str] = {
    "query": "Query",
    "mutation": "Mutation",
    "subscription": "Subscription",
}


def get_definition_kind(node) -> DefinitionKind:
    """Map a node to its DefinitionKind."""
    for node_class, kind in _KIND_BY_NODE_CLASS.items():
        if isinstance(node, node_class):
            return kind
    return DefinitionKind.UNKNOWN


def get_definition_name(node) -> Optional[str]:
    """Name of a named definition, or None for schema blocks and comments."""
    name = getattr(node, "name", None)
    if isinstance(name, gql_ast.NameNode):
        return name.value
    return None


def is_object_type_definition(node) -> bool:
    return get_definition_kind(node) == DefinitionKind.OBJECT_TYPE


def is_schema_definition(node) -> bool:
    return get_definition_kind(node) == DefinitionKind.SCHEMA


def is_comment(node) -> bool:
    return get_definition_kind(node) == DefinitionKind.COMMENT


def is_mergeable_type_definition(
    node,
    merge_all: bool = False,
    root_type_names: Optional[Iterable[str]] = None
) -> bool:
    """
    True for object type definitions that take part in field merging.

    Root operation types are always mergeable; with merge_all every object type is.
    """
    if not is_object_type_definition(node):
        return False
    if merge_all:
        return True
    names = ROOT_TYPES.values() if root_type_names is None else root_type_names
    return get_definition_name(node) in set(names)


def get_members(node) -> Optional[tuple]:
    """Member nodes of a definition, or None when its kind has no members."""
    attribute = MEMBER_ATTRIBUTE.get(get_definition_kind(node))
    if attribute is None:
        return None
    return tuple(getattr(node, attribute, None) or ())


__all__ = [
    "DefinitionKind",
    "MEMBER_ATTRIBUTE",
    "ROOT_TYPES",
    "get_definition_kind",
    "get_definition_name",
    "is_object_type_definition",
    "is_schema_definition",
    "is_comment",
    "is_mergeable_type_definition",
    "get_members",
]
