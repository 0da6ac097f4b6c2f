"""
Rewrites node descriptions into comment pseudo-nodes.

graphql-core drops `#` comments while parsing, so documentation only survives a
merge as descriptions. Each description is turned into CommentNode lines placed
directly before a copy of its node; the copy carries no description, so the text
is printed exactly once.
"""

from copy import copy
from typing import Iterable, List, Optional, Tuple, Union

from gql_compose_core.lib.ast.comment import CommentNode, make_comment_nodes
from gql_compose_core.lib.ast.kinds import MEMBER_ATTRIBUTE, get_definition_kind, is_comment


def get_description(node) -> Optional[str]:
    """Return the description text attached to a node, or None."""
    if is_comment(node):
        return None
    description = getattr(node, "description", None)
    if description is None:
        return None
    return description.value


def strip_description(node):
    """Return a shallow copy of the node without its description."""
    if get_description(node) is None:
        return node
    stripped = copy(node)
    stripped.description = None
    return stripped


def add_comments_to_ast(
    nodes: Iterable,
    flatten: bool = True
) -> Union[List, List[Tuple[List[CommentNode], object]]]:
    """
    Place comment nodes in front of every node that has a description.

    With flatten the result is one list where comments and nodes are siblings;
    otherwise it is a list of (comments, node) pairs in input order.
    """
    pairs = []
    for node in nodes:
        comments = make_comment_nodes(get_description(node))
        pairs.append((comments, strip_description(node)))

    if flatten:
        flat = []
        for comments, node in pairs:
            flat.extend(comments)
            flat.append(node)
        return flat

    return pairs


def with_commented_members(node):
    """
    Return a copy of a definition whose members carry comment nodes.

    Definitions without members (scalars, unions, directives, ...) are returned as is.
    """
    attribute = MEMBER_ATTRIBUTE.get(get_definition_kind(node))
    if attribute is None:
        return node
    rewritten = copy(node)
    setattr(rewritten, attribute, tuple(add_comments_to_ast(getattr(node, attribute, None) or ())))
    return rewritten


__all__ = [
    "add_comments_to_ast",
    "get_description",
    "strip_description",
    "with_commented_members",
]
