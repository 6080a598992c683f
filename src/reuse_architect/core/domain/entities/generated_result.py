from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from reuse_architect.core.domain.entities.file_node import FileNode


class DiagramPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: float = 0.0


class GeneratedResult(BaseModel):
    """
    Full payload of one architecture generation.
    Produced wholesale by the model; every field defaults to empty so a sparse
    answer still exposes all of them.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    analysis: str = ""
    reused_snippets: list[str] = Field(default_factory=list, alias="reusedSnippets")
    file_tree: list[FileNode] = Field(default_factory=list, alias="fileTree")
    documentation: str = ""
    diagram_data: list[DiagramPoint] = Field(default_factory=list, alias="diagramData")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
