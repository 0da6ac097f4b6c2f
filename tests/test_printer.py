"""
Tests for the comment-aware SDL printer.
"""

from graphql import parse

from gql_compose_core.lib.ast import CommentNode, DefinitionList
from gql_compose_core.lib.comments import with_commented_members
from gql_compose_core.lib.printer import print_definitions, print_document, print_node


def test_prints_plain_definitions_like_graphql_core():
    """Test nodes without comments print as usual."""
    document = parse("scalar Date\n\nunion Result = A | B")

    assert print_document(document) == "scalar Date\n\nunion Result = A | B"


def test_prints_member_comments_in_place():
    """Test comment members print as indented hash lines."""
    definition = with_commented_members(parse('type Client { "The id" id: ID! name: String }').definitions[0])

    assert print_node(definition) == "type Client {\n  # The id\n  id: ID!\n  name: String\n}"


def test_prints_header_parts():
    """Test interfaces and directives stay on the header line."""
    definition = parse("type Product implements Node & Priced @key(fields: \"id\") { id: ID! }").definitions[0]

    assert print_node(definition) == 'type Product implements Node & Priced @key(fields: "id") {\n  id: ID!\n}'


def test_prints_type_without_fields():
    """Test a definition without members prints only its header."""
    definition = parse("type Empty").definitions[0]

    assert print_node(definition) == "type Empty"


def test_indents_multiline_members():
    """Test members spanning several lines are indented as a whole."""
    definition = parse('type Query { search("term to find" term: String): [String] }').definitions[0]

    assert print_node(definition) == (
        "type Query {\n"
        "  search(\n"
        '    "term to find"\n'
        "    term: String\n"
        "  ): [String]\n"
        "}"
    )


def test_top_level_comments_stick_to_next_node():
    """Test comment lines are followed by a single newline."""
    nodes = DefinitionList([CommentNode("Dates"), *parse("scalar Date scalar Money").definitions])

    assert print_definitions(nodes) == "# Dates\nscalar Date\n\nscalar Money"
    assert nodes.to_sdl() == print_definitions(nodes)


def test_keeps_description_when_not_rewritten():
    """Test descriptions still attached to a node are printed as descriptions."""
    definition = parse('"A date" scalar Date').definitions[0]

    assert print_node(definition) == '"A date"\nscalar Date'


def test_definition_list_iterates_and_filters():
    """Test a DefinitionList iterates like a list and filters into another DefinitionList."""
    definitions = parse("scalar Date type Client { id: ID }").definitions
    nodes = DefinitionList([CommentNode("Dates"), *definitions])

    assert list(nodes) == [nodes[0], *definitions]
    assert [node for node in nodes.definitions()] == list(definitions)
    assert isinstance(nodes.definitions(), DefinitionList)
    assert nodes.names() == ["Date", "Client"]
