"""02 - Recipe workflow: chat with the chef, get a nutrition analysis when the recipe is done."""

import asyncio

from _provider import create_client

from tandem.workflow import WorkflowType, create_workflow


async def main():
    client = create_client()
    workflow = create_workflow(WorkflowType.RECIPE_CREATION, client)

    print("Describe a dish (empty line to quit).")
    while True:
        text = input("> ").strip()
        if not text:
            break
        result = await workflow.process_input(text)
        if not result.success:
            print(f"[error] {result.error.message}")
            continue
        reply = result.unwrap()
        print(f"\n[{reply.produced_by}]\n{reply.content}\n")
        if workflow.step.value == "completed":
            print("-- recipe analyzed; the next message starts a new request --")

    await client.close()


if __name__ == "__main__":
    asyncio.run(main())
