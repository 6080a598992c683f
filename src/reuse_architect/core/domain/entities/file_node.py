from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

FileKind = Literal["file", "folder"]


class FileNode(BaseModel):
    """One entry of the synthetic project tree returned by the model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    type: FileKind = "file"
    content: str | None = None
    description: str | None = None
    is_reused: bool = Field(default=False, alias="isReused")
    children: list[FileNode] | None = None

    @property
    def is_file(self) -> bool:
        return self.type == "file"

    @property
    def is_folder(self) -> bool:
        return self.type == "folder"
