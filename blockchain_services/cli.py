"""Command-line interface for blockchain services."""
from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys

from .config import load_config
from .logging_setup import configure_logging
from .models import BlockchainAccount, ContractPath
from .services import create_blockchain_service

PRIVATE_KEY_ENV = "DEPLOYER_PRIVATE_KEY"


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="blockchain-services",
        description="Deploy contracts and query balances on a blockchain network",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--network",
        default=None,
        help="Network name from the config file (default: default_network)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    deploy_parser = sub.add_parser("deploy", help="Deploy a contract to an account")
    deploy_parser.add_argument("--account", required=True, help="Target account name")
    deploy_parser.add_argument("--abi", required=True, help="Path to the ABI JSON file")
    deploy_parser.add_argument("--wasm", required=True, help="Path to the wasm module")
    deploy_parser.add_argument(
        "--private-key",
        default=None,
        help=f"Account private key (default: ${PRIVATE_KEY_ENV})",
    )

    balance_parser = sub.add_parser("balance", help="Query an account's token balance")
    balance_parser.add_argument("account", help="Account name")
    balance_parser.add_argument("--code", required=True, help="Token contract account")
    balance_parser.add_argument("--symbol", required=True, help="Token symbol")

    return parser


async def _run(args: argparse.Namespace) -> None:
    """Execute the selected command."""
    configure_logging(args.log_level)
    config = load_config(args.config)
    service = create_blockchain_service(config.network(args.network))

    if args.command == "deploy":
        private_key = args.private_key or os.environ.get(PRIVATE_KEY_ENV, "")
        if not private_key:
            print(f"No private key given (use --private-key or ${PRIVATE_KEY_ENV})")
            sys.exit(1)
        result = await service.deploy_contract(
            ContractPath(abi_path=args.abi, wasm_path=args.wasm),
            BlockchainAccount(name=args.account, private_key=private_key),
        )
        print(result.get("transaction_id", json.dumps(result)))
    elif args.command == "balance":
        balance = await service.get_balance(args.account, args.code, args.symbol)
        print(json.dumps(balance))
    else:
        build_parser().print_help()
        sys.exit(1)


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    asyncio.run(_run(args))


if __name__ == "__main__":
    main()
