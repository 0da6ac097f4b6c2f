"""
Validation layered on top of merge output.

The merge engine never rejects duplicate fields; it concatenates them. This module
finds duplicates whose signatures disagree, optionally drops exact repeats, and
builds the merged SDL with graphql-core to surface any remaining SDL errors.
"""

import logging
from collections import OrderedDict
from copy import copy
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from graphql import GraphQLSchema, build_ast_schema, print_ast
from graphql.language import DocumentNode

from gql_compose_core.lib.ast.kinds import (
    MEMBER_ATTRIBUTE,
    get_definition_kind,
    get_definition_name,
    get_members,
    is_comment,
)
from gql_compose_core.lib.comments import strip_description
from gql_compose_core.lib.parser import SchemaSource, parse_source


class SchemaValidationError(ValueError):
    """Merged SDL does not build into a valid schema."""


@dataclass(frozen=True)
class FieldConflict:
    """A member name declared more than once in one type with differing signatures."""
    type_name: str
    field_name: str
    signatures: Tuple[str, ...]

    def __str__(self) -> str:
        return f"{self.type_name}.{self.field_name}: " + " vs ".join(self.signatures)


class SchemaConflictError(SchemaValidationError):
    """One or more conflicting field declarations were found."""

    def __init__(self, conflicts: List[FieldConflict]):
        self.conflicts = conflicts
        lines = "\n".join(f"  - {conflict}" for conflict in conflicts)
        super().__init__(f"Conflicting field definitions:\n{lines}")


def member_signature(node) -> str:
    """Printed form of a member without its description."""
    return print_ast(strip_description(node))


def dedupe_members(members: Iterable) -> list:
    """
    Drop members repeating an earlier member's name and signature.

    Comment nodes belong to the member that follows them and are dropped with it.
    """
    seen = set()
    deduped = []
    pending_comments = []
    for member in members:
        if is_comment(member):
            pending_comments.append(member)
            continue
        key = (member.name.value, member_signature(member))
        if key in seen:
            logging.debug(f"Dropping duplicate member {key[1]}")
            pending_comments = []
            continue
        seen.add(key)
        deduped.extend(pending_comments)
        deduped.append(member)
        pending_comments = []
    deduped.extend(pending_comments)
    return deduped


def find_field_conflicts(source: SchemaSource) -> List[FieldConflict]:
    """Return every member name declared with more than one distinct signature within a type."""
    document = parse_source(source)
    conflicts = []
    for definition in document.definitions:
        members = get_members(definition)
        if not members:
            continue
        signatures = OrderedDict()
        for member in members:
            if is_comment(member):
                continue
            found = signatures.setdefault(member.name.value, [])
            signature = member_signature(member)
            if signature not in found:
                found.append(signature)
        for field_name, found in signatures.items():
            if len(found) > 1:
                conflicts.append(FieldConflict(get_definition_name(definition), field_name, tuple(found)))
    return conflicts


def dedupe_document(source: SchemaSource) -> DocumentNode:
    """Return a new document with repeated identical members removed from every type."""
    document = parse_source(source)
    definitions = []
    for definition in document.definitions:
        attribute = MEMBER_ATTRIBUTE.get(get_definition_kind(definition))
        if attribute is not None:
            definition = copy(definition)
            setattr(definition, attribute, tuple(dedupe_members(getattr(definition, attribute, None) or ())))
        definitions.append(definition)
    return DocumentNode(definitions=tuple(definitions))


def validate_merged_schema(sdl: SchemaSource) -> GraphQLSchema:
    """
    Check merged SDL and build it into a GraphQLSchema.

    Raises:
        SchemaConflictError: a type declares the same field with different signatures
        SchemaValidationError: graphql-core rejects the SDL (unknown types, duplicate type names, ...)
    """
    conflicts = find_field_conflicts(sdl)
    if conflicts:
        raise SchemaConflictError(conflicts)

    document = dedupe_document(sdl)
    try:
        return build_ast_schema(document)
    except TypeError as e:
        raise SchemaValidationError(str(e)) from e


__all__ = [
    "FieldConflict",
    "SchemaConflictError",
    "SchemaValidationError",
    "dedupe_document",
    "dedupe_members",
    "find_field_conflicts",
    "member_signature",
    "validate_merged_schema",
]
