"""Base model client: error normalization and the one-answer-or-one-tool-call contract."""

from __future__ import annotations

import logging

from ..errors import LLMError
from ..types import GenerationParams, GenerationResult

logger = logging.getLogger(__name__)


class BaseModelClient:
    """Subclass and implement _do_generate. Every failure surfaces as LLMError."""

    provider = "base"

    async def generate(self, params: GenerationParams) -> GenerationResult:
        logger.debug(
            "%s generate model=%s history=%d tools=%d",
            self.provider, params.model, len(params.history), len(params.tools or []),
        )
        try:
            result = await self._do_generate(params)
        except LLMError:
            raise
        except Exception as e:
            raise LLMError(
                "LLM_UNEXPECTED", self.provider, str(e) or type(e).__name__, cause=e
            ) from e
        return self._check(result)

    # -- Override this --

    async def _do_generate(self, params: GenerationParams) -> GenerationResult:
        raise NotImplementedError

    # -- Internals --

    def _check(self, result: GenerationResult) -> GenerationResult:
        if result.tool_invocation is not None:
            if result.content:
                logger.debug("Dropping text that accompanied a tool call")
            result.content = None
            return result
        if result.content is None:
            raise LLMError("LLM_EMPTY_RESPONSE", self.provider, "No content in response")
        return result
