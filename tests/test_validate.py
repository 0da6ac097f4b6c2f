"""
Tests for the validation pass layered on merge output.
"""

import pytest
from graphql import GraphQLSchema

from gql_compose_core.lib.ast import CommentNode
from gql_compose_core.lib.merge import merge_types
from gql_compose_core.lib.validate import (
    SchemaConflictError,
    SchemaValidationError,
    dedupe_document,
    dedupe_members,
    find_field_conflicts,
    validate_merged_schema,
)
from graphql import parse, print_ast

CLIENT = "type Client { id: ID! }"

MATCHING_QUERY_TYPES = [
    "type Query { getClient(id: ID!): Client }",
    "type Query { getClient(id: ID!): Client deleteClient(id: ID!): Client }",
    CLIENT,
]

CONFLICTING_QUERY_TYPES = [
    "type Query { getClient(id: ID!): Client }",
    "type Query { getClient(id: String!): Client }",
    CLIENT,
]


def test_no_conflicts_for_matching_fields():
    """Test identical duplicates are not conflicts."""
    merged = merge_types(MATCHING_QUERY_TYPES)

    assert find_field_conflicts(merged) == []


def test_reports_conflicting_fields():
    """Test differing signatures for one field are reported."""
    merged = merge_types(CONFLICTING_QUERY_TYPES)

    conflicts = find_field_conflicts(merged)

    assert len(conflicts) == 1
    assert conflicts[0].type_name == "Query"
    assert conflicts[0].field_name == "getClient"
    assert conflicts[0].signatures == ("getClient(id: ID!): Client", "getClient(id: String!): Client")


def test_validate_raises_on_conflict():
    """Test conflicting query types are rejected."""
    merged = merge_types(CONFLICTING_QUERY_TYPES)

    with pytest.raises(SchemaConflictError) as excinfo:
        validate_merged_schema(merged)

    assert "Query.getClient" in str(excinfo.value)
    assert len(excinfo.value.conflicts) == 1


def test_validate_conflicting_custom_types():
    """Test conflicts inside merged custom types are rejected too."""
    merged = merge_types(["type Custom { id: ID! }", "type Custom { id: String }", "type Query { c: Custom }"], merge_all=True)

    with pytest.raises(SchemaConflictError):
        validate_merged_schema(merged)


def test_validate_builds_matching_schema():
    """Test matching duplicates build once deduplicated."""
    merged = merge_types(MATCHING_QUERY_TYPES)

    schema = validate_merged_schema(merged)

    assert isinstance(schema, GraphQLSchema)
    assert list(schema.query_type.fields) == ["getClient", "deleteClient"]


def test_validate_full_fixture(client_type, product_type):
    """Test the merged fixtures build into a schema with all root types."""
    schema = validate_merged_schema(merge_types([client_type, product_type]))

    assert schema.query_type.name == "Query"
    assert schema.mutation_type.name == "Mutation"
    assert schema.subscription_type.name == "Subscription"
    assert "products" in schema.query_type.fields


def test_validate_reports_duplicate_type_names():
    """Test unmerged same-named types fail to build."""
    merged = merge_types(["type Query { c: Custom }", "type Custom { a: Int }", "type Custom { b: Int }"])

    with pytest.raises(SchemaValidationError) as excinfo:
        validate_merged_schema(merged)

    assert not isinstance(excinfo.value, SchemaConflictError)


def test_validate_empty_merge_fails():
    """Test the minimal schema has no Query type to build."""
    with pytest.raises(SchemaValidationError):
        validate_merged_schema(merge_types([]))


def test_dedupe_members_drops_comments_of_duplicates():
    """Test comments of a dropped member go with it."""
    fields = parse("type Query { a: Int b: Int a: Int }").definitions[0].fields
    members = [CommentNode("first a"), fields[0], fields[1], CommentNode("second a"), fields[2]]

    deduped = dedupe_members(members)

    assert deduped == [CommentNode("first a"), fields[0], fields[1]]


def test_dedupe_members_ignores_descriptions():
    """Test descriptions do not make otherwise equal members distinct."""
    fields = parse('type Query { "doc" a: Int a: Int }').definitions[0].fields

    assert len(dedupe_members(fields)) == 1


def test_dedupe_document():
    """Test every type in a document is deduplicated."""
    document = dedupe_document("type Query { a: Int a: Int } input Form { x: Int x: Int }")

    assert print_ast(document) == "type Query {\n  a: Int\n}\n\ninput Form {\n  x: Int\n}"
