"""Unit tests for the event bus."""

from tandem.events import EventBus
from tandem.types import (
    Message,
    MessageAddedEvent,
    MessageRole,
    ProcessingChangedEvent,
    ToolCallEndEvent,
    ToolCallStartEvent,
)


def _added() -> MessageAddedEvent:
    return MessageAddedEvent(source="a", message=Message(id="1", content="x", role=MessageRole.USER))


class TestEventBus:
    async def test_on_and_emit(self):
        bus = EventBus()
        received = []
        bus.on("message_added", received.append)
        await bus.emit(_added())
        await bus.emit(ProcessingChangedEvent(source="a", is_processing=True))
        assert len(received) == 1

    async def test_async_handler(self):
        bus = EventBus()
        received = []

        async def handler(e):
            received.append(e.type)

        bus.on("processing_changed", handler)
        await bus.emit(ProcessingChangedEvent(source="a", is_processing=False))
        assert received == ["processing_changed"]

    async def test_on_all(self):
        bus = EventBus()
        received = []
        bus.on_all(received.append)
        await bus.emit(_added())
        await bus.emit(ProcessingChangedEvent(source="a", is_processing=True))
        assert len(received) == 2

    async def test_pattern(self):
        bus = EventBus()
        received = []
        bus.on("tool:*", lambda e: received.append(e.type))
        await bus.emit(ToolCallStartEvent(source="a", tool_call_id="c", name="t"))
        await bus.emit(ToolCallEndEvent(source="a", tool_call_id="c", name="t", result="ok"))
        await bus.emit(_added())
        assert received == ["tool:call_start", "tool:call_end"]

    async def test_off(self):
        bus = EventBus()
        received = []
        bus.on("message_added", received.append)
        bus.off("message_added", received.append)
        await bus.emit(_added())
        assert received == []

    async def test_child_propagates_to_parent(self):
        parent = EventBus(node_id="workflow")
        child = parent.create_child("agent")
        received = []
        parent.on_all(received.append)
        await child.emit(_added())
        assert len(received) == 1
        assert child.node_id == "agent"

    async def test_handler_error_does_not_stop_others(self):
        bus = EventBus()
        received = []

        def broken(e):
            raise RuntimeError("handler bug")

        bus.on("message_added", broken)
        bus.on("message_added", received.append)
        await bus.emit(_added())
        assert len(received) == 1
