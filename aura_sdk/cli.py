"""Command-line interface for querying the Aura API."""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from .client import AuraClient
from .config import load_config
from .logging_setup import configure_logging
from .result import is_error


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="aura-sdk",
        description="Query the Aura digital asset API",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in the working directory)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    asset_parser = sub.add_parser("asset", help="Fetch a single asset")
    asset_parser.add_argument("asset_id")

    proof_parser = sub.add_parser("proof", help="Fetch the proof of a compressed asset")
    proof_parser.add_argument("asset_id")

    owner_parser = sub.add_parser("owner", help="List assets held by an address")
    owner_parser.add_argument("owner_address")
    _add_paging_args(owner_parser)

    sig_parser = sub.add_parser("signatures", help="List transaction signatures for an asset")
    sig_parser.add_argument("asset_id")
    _add_paging_args(sig_parser)

    return parser


def _add_paging_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--limit", type=int, default=None, help="Page size")
    parser.add_argument("--page", type=int, default=None, help="First page to fetch")
    parser.add_argument(
        "--all", action="store_true", help="Follow pagination until exhausted"
    )


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2))


async def _run_single(client: AuraClient, args: argparse.Namespace) -> int:
    if args.command == "asset":
        result = await client.get_asset(args.asset_id)
    else:
        result = await client.get_asset_proof(args.asset_id)

    if is_error(result):
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    _print_json(result.value)
    return 0


async def _run_paged(client: AuraClient, args: argparse.Namespace) -> int:
    params: dict[str, Any]
    if args.command == "owner":
        params = {"ownerAddress": args.owner_address}
    else:
        params = {"id": args.asset_id}
    if args.limit is not None:
        params["limit"] = args.limit
    if args.page is not None:
        params["page"] = args.page

    if args.command == "owner":
        fetch_one, paginate = client.get_assets_by_owner, client.paginate_assets_by_owner
    else:
        fetch_one, paginate = (
            client.get_signatures_for_asset,
            client.paginate_signatures_for_asset,
        )

    if not args.all:
        result = await fetch_one(params)
        if is_error(result):
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        _print_json(result.value)
        return 0

    async for page in paginate(params):
        if is_error(page):
            print(f"Error: {page.error}", file=sys.stderr)
            return 1
        _print_json(page.value)
    return 0


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    client = AuraClient.from_config(config)

    try:
        if args.command in ("asset", "proof"):
            return await _run_single(client, args)
        return await _run_paged(client, args)
    finally:
        await client.close()


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
