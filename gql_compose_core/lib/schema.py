"""
Synthesis of the single `schema { ... }` declaration of a merged document.
"""

from typing import Dict, Iterable, Optional

from graphql.language import (
    NamedTypeNode,
    NameNode,
    OperationType,
    OperationTypeDefinitionNode,
    SchemaDefinitionNode,
)

from gql_compose_core.lib.ast.kinds import ROOT_TYPES, get_definition_name, is_comment

DEFAULT_OPERATION = "query"


def _make_operation_type(operation: str, type_name: str) -> OperationTypeDefinitionNode:
    return OperationTypeDefinitionNode(
        operation=OperationType(operation),
        type=NamedTypeNode(name=NameNode(value=type_name)),
    )


def make_schema(
    merged_definitions: Iterable,
    root_types: Optional[Dict[str, str]] = None
) -> SchemaDefinitionNode:
    """
    Build the schema declaration for the merged root type groups.

    An operation is listed when a definition named after its root type is among
    the merged definitions. With no root type present the declaration still lists
    the query operation. Schema declarations from the inputs play no part.
    """
    root_types = ROOT_TYPES if root_types is None else root_types
    present = {
        get_definition_name(definition)
        for definition in merged_definitions
        if not is_comment(definition)
    }

    operation_types = [
        _make_operation_type(operation, type_name)
        for operation, type_name in root_types.items()
        if type_name in present
    ]
    if not operation_types:
        operation_types = [
            _make_operation_type(DEFAULT_OPERATION, root_types.get(DEFAULT_OPERATION, ROOT_TYPES[DEFAULT_OPERATION]))
        ]

    return SchemaDefinitionNode(directives=(), operation_types=tuple(operation_types))


__all__ = [
    "make_schema",
]
