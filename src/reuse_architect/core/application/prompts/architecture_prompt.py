from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ArchitecturePrompt:
    system_instruction: str
    user_instruction: str
    response_schema: Mapping[str, Any]
