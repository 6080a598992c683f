from __future__ import annotations

import logging
import time

from reuse_architect.core.application.parsing.result_recovery import recover_generated_result
from reuse_architect.core.application.policies.result_size_guard import ResultSizeGuard
from reuse_architect.core.application.ports.text_generation_port import TextGenerationPort
from reuse_architect.core.application.prompts.architecture_prompt_builder import (
    ArchitecturePromptBuilder,
)
from reuse_architect.core.domain.entities.generated_result import GeneratedResult
from reuse_architect.core.domain.entities.generation_request import GenerationRequest

logger = logging.getLogger(__name__)


class GenerateArchitectureUseCase:
    def __init__(
        self,
        generator: TextGenerationPort,
        prompt_builder: ArchitecturePromptBuilder | None = None,
        size_guard: ResultSizeGuard | None = None,
    ) -> None:
        self.generator = generator
        self.prompt_builder = prompt_builder or ArchitecturePromptBuilder()
        self.size_guard = size_guard or ResultSizeGuard(self.prompt_builder.max_content_lines)

    async def execute(self, request: GenerationRequest) -> GeneratedResult:
        """
        Ask the model for an architecture proposal and recover its structured answer.

        Raises:
            ConfigurationError: If no API key is configured.
            ProviderError: If the outbound call fails.
            MalformedResultError: If the answer cannot be parsed even after fence stripping.
        """
        logger.info(
            "Generating architecture for path=%s app_type=%s stack=%s architecture=%s",
            request.library_path,
            request.app_type.name,
            request.tech_stack.name,
            request.architecture.name,
        )
        start = time.perf_counter()
        prompt = self.prompt_builder.build(request)
        raw = await self.generator.generate(prompt)
        result = self.size_guard.apply(recover_generated_result(raw))
        logger.info(
            "Architecture generated in %.0f ms (%d top-level nodes, %d reused snippets)",
            (time.perf_counter() - start) * 1000,
            len(result.file_tree),
            len(result.reused_snippets),
        )
        return result
