from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class CommentNode:
    """
    Synthetic node standing for one `#` line in printed SDL.

    Attributes:
        value: The comment text without the leading `#`
    """
    value: str
    kind: str = "comment"

    def to_sdl(self) -> str:
        """Render as a single `#` line."""
        if not self.value:
            return "#"
        return f"# {self.value}"

    def __str__(self) -> str:
        return self.to_sdl()


def make_comment_nodes(description: Optional[str]) -> List[CommentNode]:
    """Split a description into one CommentNode per line."""
    if not description:
        return []
    return [CommentNode(line.rstrip()) for line in description.splitlines()]


__all__ = [
    "CommentNode",
    "make_comment_nodes",
]
