import logging
import os
from typing import Iterable, List

GRAPHQL_EXTENSIONS = (".graphql", ".gql", ".graphqls")


def _read_file(path: str) -> str:
    logging.info(f"Reading {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_source(source: str) -> List[str]:
    """
    Load SDL text from a file, a directory, or a raw SDL string.

    A directory yields one source per GraphQL file, walked recursively in sorted
    order. Blank files are skipped since they hold no definitions.
    """
    if os.path.isfile(source):
        return [_read_file(source)]

    if os.path.isdir(source):
        sdl = []
        for root, dirs, files in os.walk(source):
            dirs.sort()
            for file in sorted(files):
                if file.endswith(GRAPHQL_EXTENSIONS):
                    text = _read_file(os.path.join(root, file))
                    if text.strip():
                        sdl.append(text)
                    else:
                        logging.warning(f"Skipping empty file {os.path.join(root, file)}")

        if not sdl:
            raise ValueError(f"No GraphQL files found in directory: {source}")
        return sdl

    if source.endswith(GRAPHQL_EXTENSIONS):
        raise ValueError(f"File not found: {source}")

    # Assume raw SDL string
    return [source]


def load_sources(sources: Iterable[str]) -> List[str]:
    """Load every source in order and flatten the results."""
    loaded = []
    for source in sources:
        loaded.extend(load_source(source))
    return loaded


__all__ = [
    "GRAPHQL_EXTENSIONS",
    "load_source",
    "load_sources",
]
