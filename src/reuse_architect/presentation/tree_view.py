from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from reuse_architect.core.domain.entities.file_node import FileNode

INDENT_PX = 16
BASE_PADDING_PX = 8


@dataclass(frozen=True, slots=True)
class TreeRow:
    path: str
    name: str
    kind: str
    depth: int
    indent_px: int
    is_reused: bool
    selected: bool


def tree_rows(nodes: Sequence[FileNode] | None, selected_path: str | None = None) -> list[TreeRow]:
    """Flatten the tree depth-first into the rows shown in the project explorer."""
    return list(_walk(nodes or [], "", 0, selected_path))


def _walk(
    nodes: Sequence[FileNode], prefix: str, depth: int, selected_path: str | None
) -> Iterator[TreeRow]:
    for index, node in enumerate(nodes):
        path = f"{prefix}{index}"
        yield TreeRow(
            path=path,
            name=node.name,
            kind=node.type,
            depth=depth,
            indent_px=depth * INDENT_PX + BASE_PADDING_PX,
            is_reused=node.is_reused,
            selected=path == selected_path,
        )
        if node.children:
            yield from _walk(node.children, f"{path}/", depth + 1, selected_path)


def find_node(nodes: Sequence[FileNode] | None, path: str) -> FileNode | None:
    """Resolve an index path such as ``"0/2/1"``; None when it points nowhere."""
    current: Sequence[FileNode] | None = nodes
    node: FileNode | None = None
    for part in path.split("/"):
        if not part.isdigit() or not current:
            return None
        index = int(part)
        if index >= len(current):
            return None
        node = current[index]
        current = node.children
    return node
