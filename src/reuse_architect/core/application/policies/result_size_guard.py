from __future__ import annotations

from dataclasses import dataclass

from reuse_architect.core.domain.entities.file_node import FileNode
from reuse_architect.core.domain.entities.generated_result import GeneratedResult


@dataclass(frozen=True, slots=True)
class ResultSizeGuard:
    """
    Re-applies on the client the size rules the prompt asks the model to honour.

    File content is cut to ``max_content_lines`` lines, folder content is
    dropped and file nodes lose any children. A new result is returned.
    """

    max_content_lines: int = 10

    def apply(self, result: GeneratedResult) -> GeneratedResult:
        return result.model_copy(update={"file_tree": [self._node(n) for n in result.file_tree]})

    def _node(self, node: FileNode) -> FileNode:
        if node.is_folder:
            children = [self._node(child) for child in node.children] if node.children is not None else None
            return node.model_copy(update={"content": None, "children": children})
        return node.model_copy(update={"content": self._truncate(node.content), "children": None})

    def _truncate(self, content: str | None) -> str | None:
        if content is None:
            return None
        lines = content.splitlines()
        if len(lines) <= self.max_content_lines:
            return content
        return "\n".join(lines[: self.max_content_lines])
