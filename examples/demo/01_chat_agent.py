"""01 - Chat agent with the GitHub tools: one question, one tool round-trip."""

import asyncio

from _provider import create_client

from tandem.agent import create_chat_agent


async def main():
    client = create_client()
    agent = create_chat_agent(client)

    for question in ("Who is octocat on GitHub?", "Which of their repositories has the most stars?"):
        result = await agent.process(question)
        if result.success:
            reply = result.unwrap()
            print(f"[{reply.produced_by}] {reply.content}")
            if reply.token_usage:
                print(f"  tokens: {reply.token_usage.total_tokens}")
        else:
            print(f"[error] {result.error.code}: {result.error.message}")

    print(f"\nhistory: {len(agent.get_history())} messages")
    await client.close()


if __name__ == "__main__":
    asyncio.run(main())
