"""Agent: one conversation, one model client, at most one tool round-trip per turn."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

from ..config import AgentConfig
from ..errors import ToolProtocolError
from ..events import EventBus
from ..providers.models import GeminiModel
from ..tools import ToolCallBridge, ToolHandler, collect_declarations
from ..types import (
    ROLE_USER,
    ConversationTurn,
    GenerationParams,
    GenerationResult,
    Message,
    MessageAddedEvent,
    MessageRole,
    ModelClient,
    ProcessingChangedEvent,
    ProcessResult,
    TextPart,
    ToolConfig,
    ToolInvocation,
    new_message,
    to_turns,
)

logger = logging.getLogger(__name__)

FORMAT_TOOL_RESULT_PROMPT = (
    "Summarize the tool result above for the user as clear, well-formatted markdown. "
    "Answer the original question directly and do not call any more tools."
)


class AgentState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    AWAITING_TOOL_OR_DONE = "awaiting_tool_or_done"


class Agent:
    """A named conversational unit that owns its message history.

    ``process`` never raises for model or tool failures; they come back as a
    failed ``ProcessResult`` and the user message stays in history.
    """

    def __init__(
        self,
        client: ModelClient,
        agent_id: str,
        display_name: str,
        system_instruction: str | None = None,
        handlers: Sequence[ToolHandler] = (),
        model: GeminiModel | str | None = None,
        bridge: ToolCallBridge | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.id = agent_id
        self.display_name = display_name
        self.system_instruction = system_instruction
        self.client = client
        self.handlers = list(handlers)
        # fail fast on ambiguous tool names; declarations are rebuilt every turn
        collect_declarations(self.handlers)
        self.event_bus = event_bus or EventBus(node_id=agent_id)
        self.bridge = bridge or ToolCallBridge(self.event_bus)
        self._model = GeminiModel.resolve(model)
        self._messages: list[Message] = []
        self._state = AgentState.IDLE

    @classmethod
    def from_config(
        cls,
        client: ModelClient,
        config: AgentConfig,
        handlers: Sequence[ToolHandler] = (),
        event_bus: EventBus | None = None,
    ) -> Agent:
        return cls(
            client,
            agent_id=config.agent_id,
            display_name=config.display_name,
            system_instruction=config.system_instruction,
            handlers=handlers,
            model=config.model,
            event_bus=event_bus,
        )

    # -- Public API --

    @property
    def model(self) -> str | None:
        """``None`` defers to the model configured on the client."""
        return self._model

    @property
    def state(self) -> AgentState:
        return self._state

    @property
    def is_processing(self) -> bool:
        return self._state is not AgentState.IDLE

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def get_history(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def set_model(self, model: GeminiModel | str | None) -> None:
        """Applies to the next generation; calls already in flight keep their model."""
        self._model = GeminiModel.resolve(model)

    def clear_history(self) -> None:
        self._messages.clear()

    async def process(self, input_text: str) -> ProcessResult:
        history = to_turns(self._messages)
        await self._set_state(AgentState.GENERATING)
        await self._append(new_message(self.id, input_text, MessageRole.USER, after=self._last()))

        try:
            result = await self._generate(input_text, history)
        except Exception as e:
            logger.warning("Agent %s turn failed: %s", self.id, e)
            await self._set_state(AgentState.IDLE)
            return ProcessResult.failure(e)

        reply = new_message(
            self.id,
            result.content or "",
            MessageRole.ASSISTANT,
            after=self._last(),
            token_usage=result.usage,
            produced_by=self.display_name,
        )
        await self._append(reply)
        await self._set_state(AgentState.IDLE)
        return ProcessResult.ok(reply)

    # -- Internals --

    async def _generate(self, input_text: str, history: list[ConversationTurn]) -> GenerationResult:
        tools = collect_declarations(self.handlers)
        params = GenerationParams(
            prompt=input_text,
            model=self._model,
            history=history,
            system_instruction=self.system_instruction,
            tools=tools or None,
            tool_config=ToolConfig(mode="AUTO") if tools else None,
        )
        result = await self.client.generate(params)
        await self._set_state(AgentState.AWAITING_TOOL_OR_DONE)

        if result.tool_invocation is None:
            return result
        return await self._tool_round_trip(input_text, history, result.tool_invocation)

    async def _tool_round_trip(
        self, input_text: str, history: list[ConversationTurn], invocation: ToolInvocation
    ) -> GenerationResult:
        logger.debug("Agent %s calling tool %s", self.id, invocation.name)
        response = await self.bridge.execute(invocation, self.handlers, source=self.id)

        # local copy only; the tool exchange is never persisted as Messages
        local = [
            *history,
            ConversationTurn(role=ROLE_USER, parts=(TextPart(input_text),)),
            ConversationTurn.tool_call(invocation),
            ConversationTurn.tool_result(response),
        ]
        await self._set_state(AgentState.GENERATING)
        result = await self.client.generate(GenerationParams(
            prompt=FORMAT_TOOL_RESULT_PROMPT,
            model=self._model,
            history=local,
            system_instruction=self.system_instruction,
        ))
        await self._set_state(AgentState.AWAITING_TOOL_OR_DONE)

        if result.tool_invocation is not None:
            raise ToolProtocolError(result.tool_invocation.name)
        return result

    def _last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    async def _append(self, message: Message) -> None:
        self._messages.append(message)
        await self.event_bus.emit(MessageAddedEvent(source=self.id, message=message))

    async def _set_state(self, state: AgentState) -> None:
        was_processing = self.is_processing
        self._state = state
        if was_processing != self.is_processing:
            await self.event_bus.emit(
                ProcessingChangedEvent(source=self.id, is_processing=self.is_processing)
            )
