"""
SDL printer that understands comment pseudo-nodes.

Ordinary nodes are printed with graphql-core's print_ast. Definitions whose member
lists contain CommentNode entries get their body assembled here, since print_ast
only knows the node kinds of the GraphQL grammar.
"""

from copy import copy
from typing import Iterable

from graphql import print_ast

from gql_compose_core.lib.ast.kinds import MEMBER_ATTRIBUTE, get_definition_kind, is_comment

INDENT = "  "


def _indent(text: str) -> str:
    return INDENT + text.replace("\n", "\n" + INDENT)


def print_member(node) -> str:
    """Print a field, input field, enum value or comment line."""
    if is_comment(node):
        return node.to_sdl()
    return print_ast(node)


def print_node(node) -> str:
    """Print one top-level node."""
    if is_comment(node):
        return node.to_sdl()

    attribute = MEMBER_ATTRIBUTE.get(get_definition_kind(node))
    if attribute is None:
        return print_ast(node)

    members = getattr(node, attribute, None) or ()
    header_node = copy(node)
    setattr(header_node, attribute, ())
    header = print_ast(header_node)
    if not members:
        return header

    body = "\n".join(_indent(print_member(member)) for member in members)
    return f"{header} {{\n{body}\n}}"


def print_definitions(nodes: Iterable) -> str:
    """
    Print a sequence of nodes as one SDL document.

    Comment lines stick to the node that follows them; definitions are separated
    by a blank line.
    """
    printed = ""
    previous_was_comment = False
    for node in nodes:
        if printed:
            printed += "\n" if previous_was_comment else "\n\n"
        printed += print_node(node)
        previous_was_comment = is_comment(node)
    return printed


def print_document(document) -> str:
    """Print a DocumentNode whose definitions may include comment nodes."""
    return print_definitions(document.definitions)


__all__ = [
    "print_definitions",
    "print_document",
    "print_member",
    "print_node",
]
