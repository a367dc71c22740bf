"""
Operator CLI.

Usage:
    python -m quantum_link.cli register --email alice@example.com --name Alice
    python -m quantum_link.cli token --identity-id <id> [--handle alice-1234]
    python -m quantum_link.cli watch --token <jwt> [--peer bob-5678]

`register` talks to the database directly (run `prisma generate` first);
`watch` only needs a running server.
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from quantum_link.application.commands.identity import (
    RegisterIdentityCommand,
    RegisterIdentityHandler,
)
from quantum_link.client import QuantumLinkClient, SyncSession, ViewState
from quantum_link.config.logging_config import setup_logging
from quantum_link.config.settings import Config
from quantum_link.domain.exceptions import QuantumLinkError
from quantum_link.presentation.dependencies.auth import issue_session_token

logger = logging.getLogger(__name__)


async def register_identity(
    email: Optional[str], name: Optional[str], image: Optional[str]
):
    # Imported here: the production container pulls in the generated Prisma client
    from quantum_link.setup.ioc.container import create_container

    container = create_container()
    try:
        async with container() as request_container:
            handler = await request_container.get(RegisterIdentityHandler)
            return await handler.execute(
                RegisterIdentityCommand(email=email, name=name, image=image)
            )
    finally:
        await container.close()


def render(state: ViewState) -> None:
    print("-" * 60)
    print(f"Outgoing ({len(state.outgoing)}):")
    for r in state.outgoing:
        who = r.to_user.handle if r.to_user else "?"
        print(f"  -> {who:<20} {r.status:<9} {', '.join(r.categories)}")
    print(f"Incoming ({len(state.incoming)}):")
    for r in state.incoming:
        who = r.from_user.handle if r.from_user else "?"
        print(f"  <- {who:<20} {r.status:<9} {', '.join(r.categories)}  [{r.id}]")
    if state.active_peer:
        print(f"Conversation with {state.active_peer} ({state.room_id or 'loading'}):")
        for m in state.messages:
            mine = state.peer is None or m.sender_id != state.peer.id
            print(f"  {'me' if mine else state.active_peer}: {m.content}")


async def watch(token: str, base_url: str, peer: Optional[str]) -> None:
    async with QuantumLinkClient(token, base_url=base_url) as client:
        session = SyncSession(client, on_change=render)
        await session.sign_in()
        if peer:
            await session.open_conversation(peer)
        try:
            while True:
                await asyncio.sleep(3600)
        finally:
            await session.sign_out()


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="quantum-link",
        description="Quantum Link operator tools",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    register = subparsers.add_parser(
        "register", help="Create an identity, allocate its quantum ID and print a session token"
    )
    register.add_argument("--email", type=str, default=None, help="Provider email")
    register.add_argument("--name", type=str, default=None, help="Display name")
    register.add_argument("--image", type=str, default=None, help="Avatar URL")

    token = subparsers.add_parser("token", help="Issue a session token for an identity")
    token.add_argument("--identity-id", type=str, required=True, help="Identity id")
    token.add_argument(
        "--handle",
        type=str,
        default=None,
        help="Quantum ID to embed (omit to let the server backfill it)",
    )

    watch_parser = subparsers.add_parser(
        "watch", help="Poll request lists (and optionally a conversation) until interrupted"
    )
    watch_parser.add_argument("--token", type=str, required=True, help="Session token")
    watch_parser.add_argument("--peer", type=str, default=None, help="Peer quantum ID to follow")
    watch_parser.add_argument(
        "--base-url",
        type=str,
        default=Config.API_BASE_URL,
        help=f"API base URL (default: {Config.API_BASE_URL})",
    )

    args = parser.parse_args(argv)
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

    if args.command == "register":
        if not args.email and not args.name:
            parser.error("register needs --email or --name")
        try:
            identity = asyncio.run(register_identity(args.email, args.name, args.image))
        except QuantumLinkError as e:
            print(f"Registration failed: {e.message}", file=sys.stderr)
            return 1
        print(f"id:     {identity.id.value}")
        print(f"handle: {identity.handle or '(unassigned, will be backfilled on first request)'}")
        print(f"token:  {issue_session_token(identity.id.value, identity.handle)}")
        return 0

    if args.command == "token":
        print(issue_session_token(args.identity_id, args.handle))
        return 0

    try:
        asyncio.run(watch(args.token, args.base_url, args.peer))
    except KeyboardInterrupt:
        print("\nStopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
