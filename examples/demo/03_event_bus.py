"""03 - EventBus: watch messages, processing flags and tool calls from a workflow."""

import asyncio

from _provider import create_client

from tandem import EventBus
from tandem.workflow import WorkflowType, create_workflow


async def main():
    bus = EventBus(node_id="monitor")
    log = []

    def on_tool(e):
        log.append(f"{e.type} {e.name}")

    def on_message(e):
        log.append(f"message_added from {e.source}: {e.message.role.value}")

    bus.on("tool:*", on_tool)
    bus.on("message_added", on_message)

    client = create_client()
    workflow = create_workflow(WorkflowType.SIMPLE_CHAT, client, event_bus=bus)
    result = await workflow.process_input("List the repositories of torvalds")
    print(result.unwrap().content[:300] if result.success else result.error.message)

    print("\n[events]")
    for line in log:
        print(f"  {line}")
    await client.close()


if __name__ == "__main__":
    asyncio.run(main())
