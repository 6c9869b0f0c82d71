"""Gemini model client: uses the OpenAI-compatible endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from ..config import ClientConfig
from ..errors import LLMError
from ..types import (
    ROLE_MODEL,
    ROLE_TOOL,
    ConversationTurn,
    GenerationParams,
    GenerationResult,
    TextPart,
    TokenUsage,
    ToolConfig,
    ToolDeclaration,
    ToolInvocation,
    ToolResponse,
)
from .base import BaseModelClient

logger = logging.getLogger(__name__)

_GEMINI_BASE = "https://generativelanguage.googleapis.com/v1beta/openai/"

_TOOL_CHOICE = {"AUTO": "auto", "ANY": "required", "NONE": "none"}


def _turn_to_dicts(turn: ConversationTurn) -> list[dict]:
    if turn.role == ROLE_TOOL:
        return [
            {"role": "tool", "tool_call_id": p.call_id, "content": json.dumps(p.to_payload())}
            for p in turn.parts if isinstance(p, ToolResponse)
        ]
    text = "".join(p.text for p in turn.parts if isinstance(p, TextPart))
    if turn.role != ROLE_MODEL:
        return [{"role": "user", "content": text}]
    d: dict = {"role": "assistant", "content": text or None}
    calls = [p for p in turn.parts if isinstance(p, ToolInvocation)]
    if calls:
        d["tool_calls"] = [
            {
                "id": c.id,
                "type": "function",
                "function": {"name": c.name, "arguments": json.dumps(c.arguments)},
            }
            for c in calls
        ]
    return [d]


def _tools_to_dicts(tools: list[ToolDeclaration]) -> list[dict]:
    return [{"type": "function", "function": t.to_dict()} for t in tools]


def _parse_arguments(raw: str | None) -> dict[str, Any]:
    try:
        args = json.loads(raw or "{}")
    except (json.JSONDecodeError, TypeError):
        logger.warning("Malformed tool arguments: %r", raw)
        return {}
    return args if isinstance(args, dict) else {}


def _error_message(err: openai.APIStatusError) -> str:
    body = err.body
    if isinstance(body, list) and body:
        body = body[0]
    if isinstance(body, dict):
        inner = body.get("error", body)
        if isinstance(inner, dict) and inner.get("message"):
            return str(inner["message"])
    reason = err.response.reason_phrase if err.response is not None else ""
    return f"HTTP {err.status_code}: {reason}".rstrip(": ")


class GeminiClient(BaseModelClient):
    provider = "gemini"

    def __init__(self, config: ClientConfig | None = None, client: AsyncOpenAI | None = None) -> None:
        self.config = config or ClientConfig.from_env()
        if client is None:
            if not self.config.api_key:
                raise ValueError(
                    "Gemini API key must be provided or set in GEMINI_API_KEY env var."
                )
            client = AsyncOpenAI(
                api_key=self.config.api_key,
                base_url=self.config.base_url or _GEMINI_BASE,
                timeout=self.config.timeout,
            )
        self._client = client

    def build_request(self, params: GenerationParams) -> dict:
        messages: list[dict] = []
        if params.system_instruction:
            messages.append({"role": "system", "content": params.system_instruction})
        for turn in params.history:
            messages.extend(_turn_to_dicts(turn))
        messages.append({"role": "user", "content": params.prompt})

        kwargs: dict = {
            "model": params.model or self.config.model,
            "messages": messages,
            "temperature": self.config.temperature,
            "top_p": self.config.top_p,
            "max_tokens": self.config.max_output_tokens,
        }
        if params.tools:
            kwargs["tools"] = _tools_to_dicts(params.tools)
            mode = (params.tool_config or ToolConfig()).mode
            kwargs["tool_choice"] = _TOOL_CHOICE[mode]
        return kwargs

    async def _do_generate(self, params: GenerationParams) -> GenerationResult:
        try:
            resp = await self._client.chat.completions.create(**self.build_request(params))
        except openai.APIStatusError as e:
            raise LLMError(
                "LLM_HTTP_ERROR", self.provider, _error_message(e),
                status_code=e.status_code, cause=e,
            ) from e
        except openai.APIConnectionError as e:
            raise LLMError(
                "LLM_TRANSPORT_ERROR", self.provider, f"Connection failed: {e}", cause=e
            ) from e
        except openai.APIError as e:
            raise LLMError("LLM_BAD_RESPONSE", self.provider, str(e), cause=e) from e

        if not resp.choices:
            raise LLMError("LLM_BAD_RESPONSE", self.provider, "No candidates in response")
        message = resp.choices[0].message

        usage = None
        if resp.usage:
            usage = TokenUsage(
                prompt_tokens=resp.usage.prompt_tokens or 0,
                response_tokens=resp.usage.completion_tokens or 0,
                total_tokens=resp.usage.total_tokens or 0,
            )

        if message.tool_calls:
            if len(message.tool_calls) > 1:
                logger.warning(
                    "Model requested %d tool calls; only the first is executed",
                    len(message.tool_calls),
                )
            tc = message.tool_calls[0]
            extra = {"id": tc.id} if tc.id else {}
            invocation = ToolInvocation(
                name=tc.function.name, arguments=_parse_arguments(tc.function.arguments), **extra
            )
            return GenerationResult(usage=usage, tool_invocation=invocation)

        return GenerationResult(content=message.content, usage=usage)

    async def close(self) -> None:
        await self._client.close()
