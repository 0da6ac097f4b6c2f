"""
DefinitionList container for definition and comment nodes.
"""

from typing import List, Optional, Callable, Any
from gql_compose_core.lib.ast.kinds import get_definition_name, is_comment


class DefinitionList(list):
    """
    Container for a sequence of top-level nodes, with utilities for filtering, naming and exporting to SDL.
    """
    def __init__(self, items: Optional[List[Any]] = None):
        super().__init__(items or [])

    def names(self) -> List[str]:
        # Comment nodes have no name and are skipped
        return [get_definition_name(node) for node in self if not is_comment(node)]

    def definitions(self) -> 'DefinitionList':
        return self.filter(lambda node: not is_comment(node))

    def to_sdl(self) -> str:
        # Import here to avoid circular dependency
        from gql_compose_core.lib.printer import print_definitions
        return print_definitions(self)

    def filter(self, predicate: Callable[[Any], bool]) -> 'DefinitionList':
        return DefinitionList([node for node in self if predicate(node)])

    def __str__(self):
        return f"DefinitionList({len(self)} nodes)"

    def __repr__(self):
        return f"DefinitionList(nodes={list.__repr__(self)})"


__all__ = [
    "DefinitionList",
]
