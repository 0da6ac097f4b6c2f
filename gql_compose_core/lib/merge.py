"""
Merge engine: combines several SDL documents into one schema document.
"""

import logging
from collections import OrderedDict
from copy import copy
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from gql_compose_core.lib.ast.kinds import (
    ROOT_TYPES,
    get_definition_name,
    is_mergeable_type_definition,
    is_object_type_definition,
    is_schema_definition,
)
from gql_compose_core.lib.ast.list import DefinitionList
from gql_compose_core.lib.comments import add_comments_to_ast, with_commented_members
from gql_compose_core.lib.parser import SchemaSource, extract_definitions
from gql_compose_core.lib.printer import print_definitions
from gql_compose_core.lib.schema import make_schema
from gql_compose_core.lib.validate import dedupe_members


@dataclass(frozen=True)
class MergeOptions:
    """
    Settings for a merge call.

    Attributes:
        merge_all: Merge every object type sharing a name, not only root operation types
        dedupe: Drop fields repeated with an identical signature inside merged types
        root_types: Operation name to root type name, in schema declaration order
    """
    merge_all: bool = False
    dedupe: bool = False
    root_types: Dict[str, str] = field(default_factory=lambda: dict(ROOT_TYPES))

    @property
    def root_type_names(self) -> List[str]:
        return list(self.root_types.values())


@dataclass
class MergeResult:
    """Outcome of the merge reducer before printing."""
    schema: object
    merged: DefinitionList
    rest: DefinitionList

    def to_sdl(self) -> str:
        """Schema declaration and merged types first, then each pass-through definition."""
        blocks = [print_definitions([self.schema, *self.merged])]
        for comments, definition in add_comments_to_ast(self.rest, flatten=False):
            blocks.append(print_definitions([*comments, definition]))
        return "\n\n".join(blocks)


def _is_mergeable(definition, options: MergeOptions) -> bool:
    return is_mergeable_type_definition(definition, options.merge_all, options.root_type_names)


def make_rest_definitions(definitions: Iterable, options: Optional[MergeOptions] = None) -> DefinitionList:
    """Pass-through definitions with their members comment-rewritten; schema blocks are dropped."""
    options = options or MergeOptions()
    return DefinitionList([
        with_commented_members(definition)
        for definition in definitions
        if not _is_mergeable(definition, options) and not is_schema_definition(definition)
    ])


def make_merged_definitions(definitions: Iterable, options: Optional[MergeOptions] = None) -> DefinitionList:
    """
    Group mergeable object types by name and concatenate their fields.

    Root types are seeded first so they keep declaration order; any other group
    follows in first-encounter order. Attributes other than fields come from the
    first definition seen for a name. Groups nobody contributed to are left out.
    """
    options = options or MergeOptions()
    groups = OrderedDict((name, None) for name in options.root_type_names)

    for definition in definitions:
        if not _is_mergeable(definition, options):
            continue
        name = get_definition_name(definition)
        fields = add_comments_to_ast(definition.fields or ())

        if groups.get(name) is None:
            logging.debug(f"New merge group {name} with {len(definition.fields or ())} fields")
            merged = copy(definition)
            merged.fields = tuple(fields)
            groups[name] = merged
        else:
            logging.debug(f"Appending {len(definition.fields or ())} fields to {name}")
            groups[name].fields = tuple(groups[name].fields) + tuple(fields)

    if options.dedupe:
        for merged in groups.values():
            if merged is not None:
                merged.fields = tuple(dedupe_members(merged.fields))

    merged_definitions = DefinitionList()
    for merged in groups.values():
        if merged is None:
            continue
        comments, merged = add_comments_to_ast([merged], flatten=False)[0]
        merged_definitions.extend(comments)
        merged_definitions.append(merged)
    return merged_definitions


def merge_definitions(definitions: Iterable, options: Optional[MergeOptions] = None) -> MergeResult:
    """Run the merge reducer and schema synthesis over already flattened definitions."""
    options = options or MergeOptions()
    definitions = list(definitions)

    merged = make_merged_definitions(definitions, options)
    rest = make_rest_definitions(definitions, options)
    schema = make_schema(merged, options.root_types)

    dropped = sum(1 for definition in definitions if is_schema_definition(definition))
    if dropped:
        logging.debug(f"Dropped {dropped} schema declarations from inputs")
    logging.info(
        f"Merged {len(merged.definitions())} types, "
        f"{len(rest)} pass-through definitions "
        f"({sum(1 for d in rest if is_object_type_definition(d))} object types)"
    )
    return MergeResult(schema=schema, merged=merged, rest=rest)


def merge_types(
    sources: Iterable[SchemaSource],
    merge_all: bool = False,
    options: Optional[MergeOptions] = None
) -> str:
    """
    Merge schema sources into one SDL document.

    Args:
        sources: SDL strings or pre-parsed DocumentNode objects, in merge order
        merge_all: Merge every object type by name, not only Query/Mutation/Subscription
        options: Full MergeOptions; when given, merge_all is ignored

    Returns:
        SDL text with exactly one schema declaration
    """
    if options is None:
        options = MergeOptions(merge_all=merge_all)
    definitions = extract_definitions(sources)
    return merge_definitions(definitions, options).to_sdl()


__all__ = [
    "MergeOptions",
    "MergeResult",
    "make_merged_definitions",
    "make_rest_definitions",
    "merge_definitions",
    "merge_types",
]
