#!/usr/bin/env python3
"""
CLI for managing Ironclad client registrations.

Usage:
    ironclad-clients list [--start N] [--size N]   # List client summaries
    ironclad-clients get <id>                      # Show one client
    ironclad-clients register <file>               # Register a client from JSON
    ironclad-clients modify <file>                 # Replace a client from JSON
    ironclad-clients unregister <id>               # Remove a client
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

import httpx

from .config import Settings
from .errors import IroncladError
from .ironclad import IroncladClient
from .models import Client
from .serialization import to_wire
from .utils.logging import get_logger

logger = get_logger(__name__, prefix="CLI")


def _read_client(path: str) -> Client:
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path) as f:
            data = json.load(f)
    return Client.from_dict(data)


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


async def cmd_list(args, ironclad: IroncladClient) -> int:
    """List client summaries."""
    page = await ironclad.get_client_summaries(start=args.start, size=args.size)
    _print_json(to_wire(page))
    return 0


async def cmd_get(args, ironclad: IroncladClient) -> int:
    """Show a single client."""
    client = await ironclad.get_client(args.id)
    _print_json(to_wire(client))
    return 0


async def cmd_register(args, ironclad: IroncladClient) -> int:
    """Register a client."""
    client = _read_client(args.file)
    await ironclad.register_client(client)
    print(f"Registered client: {client.id}")
    return 0


async def cmd_modify(args, ironclad: IroncladClient) -> int:
    """Replace a client's registration."""
    client = _read_client(args.file)
    await ironclad.modify_client(client)
    print(f"Updated client: {client.id}")
    return 0


async def cmd_unregister(args, ironclad: IroncladClient) -> int:
    """Remove a client."""
    await ironclad.unregister_client(args.id)
    print(f"Unregistered client: {args.id}")
    return 0


async def run(args) -> int:
    settings = Settings.from_env()
    authority = args.authority or settings.authority
    token = args.token or settings.access_token

    async with IroncladClient(authority, access_token=token) as ironclad:
        try:
            return await args.func(args, ironclad)
        except (IroncladError, httpx.TransportError, ValueError, TypeError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ironclad-clients",
        description="Manage client registrations on an Ironclad server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list --size 50             List the first 50 clients
  %(prog)s get app1                   Show client 'app1'
  %(prog)s register app1.json         Register the client described in app1.json
  %(prog)s modify app1.json           Replace client 'app1' with app1.json
  %(prog)s unregister app1            Remove client 'app1'
        """,
    )

    parser.add_argument("--authority", help="Ironclad server URL (default: $IRONCLAD_AUTHORITY)")
    parser.add_argument("--token", help="Bearer token (default: $IRONCLAD_ACCESS_TOKEN)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # list
    list_parser = subparsers.add_parser("list", aliases=["ls"], help="List clients")
    list_parser.add_argument("--start", type=int, default=0, help="Offset of the first client")
    list_parser.add_argument("--size", type=int, default=0, help="Page size (default: 20)")
    list_parser.set_defaults(func=cmd_list)

    # get
    get_parser = subparsers.add_parser("get", aliases=["show"], help="Show a client")
    get_parser.add_argument("id", help="Client id")
    get_parser.set_defaults(func=cmd_get)

    # register
    register_parser = subparsers.add_parser("register", aliases=["add"], help="Register a client")
    register_parser.add_argument("file", help="JSON client document ('-' for stdin)")
    register_parser.set_defaults(func=cmd_register)

    # modify
    modify_parser = subparsers.add_parser("modify", aliases=["update"], help="Replace a client")
    modify_parser.add_argument("file", help="JSON client document ('-' for stdin)")
    modify_parser.set_defaults(func=cmd_modify)

    # unregister
    unregister_parser = subparsers.add_parser("unregister", aliases=["rm"], help="Remove a client")
    unregister_parser.add_argument("id", help="Client id")
    unregister_parser.set_defaults(func=cmd_unregister)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Running %s", args.command)

    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
