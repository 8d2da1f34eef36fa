"""MemU client walkthrough.

This example memorizes a short conversation, waits for the memorization task
to finish, then lists the resulting categories and retrieves memories with
both a text query and a conversation query.

Run with:
    MEMU_API_KEY=your-key python examples/demo.py
"""

import asyncio

from memu_client import (
    AuthenticationError,
    ConversationMessage,
    MemUClient,
    MemUError,
    RateLimitError,
    TaskTimeoutError,
)


USER_ID = "demo-user"
AGENT_ID = "demo-agent"

CONVERSATION = [
    {"role": "user", "content": "I just finished reading Foundation by Asimov."},
    {"role": "assistant", "content": "Great choice! Did you enjoy it?"},
    {"role": "user", "content": "Loved it. I read sci-fi every night before bed."},
    {"role": "assistant", "content": "I'll remember that you enjoy science fiction."},
]


async def memorize_conversation(client: MemUClient) -> None:
    print("📝 Memorizing conversation...")
    result = await client.memorize(
        conversation=CONVERSATION,
        user_id=USER_ID,
        agent_id=AGENT_ID,
        user_name="Demo User",
        agent_name="Demo Assistant",
    )
    print(f"   Task submitted: {result.task_id} ({result.status})")

    try:
        status = await client.wait_for_task(result.task_id, poll_interval=2, timeout=120)
    except TaskTimeoutError as e:
        print(f"   ⏰ {e.message}")
        return

    if status.is_successful:
        print(f"   ✅ Task finished: {status.status}")
    else:
        print(f"   ❌ Task failed: {status.message or status.status}")


async def show_categories(client: MemUClient) -> None:
    print("\n📂 Memory categories:")
    categories = await client.list_categories(user_id=USER_ID, agent_id=AGENT_ID)
    if not categories:
        print("   (none yet)")
    for category in categories:
        print(f"   - {category.name}: {category.summary or category.description or ''}")


async def retrieve_memories(client: MemUClient) -> None:
    print("\n🔍 Retrieving with a text query...")
    result = await client.retrieve(
        query="What kind of books does the user like?",
        user_id=USER_ID,
        agent_id=AGENT_ID,
    )
    if result.rewritten_query:
        print(f"   Rewritten query: {result.rewritten_query}")
    for item in result.items:
        print(f"   - [{item.memory_type or 'memory'}] {item.content}")

    print("\n🔍 Retrieving with a conversation query...")
    result = await client.retrieve(
        query=[
            ConversationMessage(role="user", content="Can you recommend something to read tonight?"),
        ],
        user_id=USER_ID,
        agent_id=AGENT_ID,
    )
    print(f"   {len(result.items)} items, {len(result.categories)} categories")


async def main() -> None:
    try:
        async with MemUClient() as client:
            await memorize_conversation(client)
            await show_categories(client)
            await retrieve_memories(client)
    except ValueError as e:
        print(f"Configuration error: {e}")
    except AuthenticationError as e:
        print(f"🔒 Authentication failed: {e}")
    except RateLimitError as e:
        print(f"🚦 Rate limited, retry after {e.retry_after}s: {e}")
    except MemUError as e:
        print(f"💥 MemU API error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
