#!/usr/bin/env python3
"""Chatroom CLI for manual RongCloud API checks.

Credentials are read from RONGCLOUD_APP_KEY and RONGCLOUD_APP_SECRET, and an
optional RONGCLOUD_BASE_URL. Every command prints one JSON object.
"""

import asyncio
import json
import os
import sys
from dataclasses import asdict

from rongcloud import DEFAULT_BASE_URL, RongCloudClient, RongCloudError


async def create(client: RongCloudClient, chatroom_id: str, name: str) -> None:
    """Create a chatroom."""
    await client.chatroom.create(chatroom_id, name)
    print(json.dumps({"success": True}))


async def info(client: RongCloudClient, chatroom_id: str) -> None:
    """Print chatroom details."""
    room = await client.chatroom.get(chatroom_id)
    print(json.dumps(asdict(room)))


async def members(client: RongCloudClient, chatroom_id: str) -> None:
    """Print up to 500 members, oldest first."""
    result = await client.chatroom.query_members(chatroom_id, 500, 1)
    print(json.dumps(asdict(result)))


async def mute(client: RongCloudClient, chatroom_id: str, user_ids: list[str]) -> None:
    """Mute users in a chatroom for ten minutes."""
    await client.chatroom.gag_add(chatroom_id, user_ids, 10)
    print(json.dumps({"success": True}))


async def destroy(client: RongCloudClient, chatroom_id: str) -> None:
    """Destroy a chatroom."""
    await client.chatroom.destroy(chatroom_id)
    print(json.dumps({"success": True}))


async def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 3:
        print("usage: chatroom_cli.py <command> <chatroom-id> [args]", file=sys.stderr)
        sys.exit(1)

    command, chatroom_id, args = sys.argv[1], sys.argv[2], sys.argv[3:]

    async with RongCloudClient(
        os.environ["RONGCLOUD_APP_KEY"],
        os.environ["RONGCLOUD_APP_SECRET"],
        base_url=os.environ.get("RONGCLOUD_BASE_URL", DEFAULT_BASE_URL),
    ) as client:
        try:
            if command == "create":
                await create(client, chatroom_id, args[0] if args else chatroom_id)
            elif command == "info":
                await info(client, chatroom_id)
            elif command == "members":
                await members(client, chatroom_id)
            elif command == "mute":
                if not args:
                    print("usage: chatroom_cli.py mute <chatroom-id> <user-id>...", file=sys.stderr)
                    sys.exit(1)
                await mute(client, chatroom_id, args)
            elif command == "destroy":
                await destroy(client, chatroom_id)
            else:
                print(f"unknown command: {command}", file=sys.stderr)
                sys.exit(1)
        except RongCloudError as e:
            print(json.dumps({"success": False, "error": str(e)}))
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
