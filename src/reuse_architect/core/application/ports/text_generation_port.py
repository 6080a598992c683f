from __future__ import annotations

from abc import ABC, abstractmethod

from reuse_architect.core.application.prompts.architecture_prompt import ArchitecturePrompt


class TextGenerationPort(ABC):
    @abstractmethod
    async def generate(self, prompt: ArchitecturePrompt) -> str:
        """Send the prompt to the hosted model and return its raw text answer."""
