"""
Deployment CLI
Usage: python deploy.py [contract_id] [--confirm]

Environment variables (CLI flags override all but the key, which is read only from the environment):
    NEAR_ACCOUNT_ID   - signer account, also the default target
    NEAR_PRIVATE_KEY  - signer key ("ed25519:...")
    NEAR_RPC_URL      - RPC endpoint (default picked from the target network)
    NEAR_ENV          - "testnet" or "mainnet", overrides the suffix-based guess for the RPC
    CONTRACT_BIN_DIR  - directory holding tenk.wasm
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from blockchain.exceptions import ConfigurationError, DeploymentError
from blockchain.near_client import NearClient
from utils.network import default_rpc_url, is_testnet, is_valid_account_id
from .deployment import DeploymentOrchestrator, report


def configure_logging(log_file: Optional[str] = "data/logs/deploy.log"):
    """Coloured stderr at INFO, rotating file at DEBUG"""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level="INFO"
    )
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Deploy the TenK NFT contract to NEAR")
    parser.add_argument(
        "contract_id",
        nargs="?",
        default=None,
        help="Target account; defaults to the signer account",
    )
    parser.add_argument("--account-id", default=None, help="Signer account; falls back to NEAR_ACCOUNT_ID env")
    parser.add_argument("--rpc-url", default=None, help="RPC endpoint; falls back to NEAR_RPC_URL env")
    parser.add_argument("--bin-dir", type=Path, default=None, help="Directory holding tenk.wasm")
    parser.add_argument("--media-extension", default=None, help="Media file extension, without the dot")
    parser.add_argument("--env-file", default=None, help="Optional .env file to load before reading env vars")
    parser.add_argument("--log-file", default="data/logs/deploy.log", help="Debug log file (default: %(default)s)")
    parser.add_argument("--confirm", action="store_true", help="Ask for confirmation before broadcasting")
    return parser.parse_args(argv)


def resolve_rpc_url(args: argparse.Namespace, target: str) -> str:
    if args.rpc_url or os.getenv('NEAR_RPC_URL'):
        return args.rpc_url or os.getenv('NEAR_RPC_URL')

    near_env = os.getenv('NEAR_ENV')
    testnet = near_env == 'testnet' if near_env else is_testnet(target)
    return default_rpc_url(testnet)


def confirm(target: str) -> bool:
    answer = input(f"\nProceed with deployment to {target}? (yes/no): ")
    return answer.strip().lower() == 'yes'


async def run(args: argparse.Namespace) -> int:
    """Deploy and report; returns the process exit code"""
    account_id = args.account_id or os.getenv('NEAR_ACCOUNT_ID')
    private_key = os.getenv('NEAR_PRIVATE_KEY')

    if not account_id or not private_key:
        raise ConfigurationError("NEAR_ACCOUNT_ID and NEAR_PRIVATE_KEY must be set")

    target = args.contract_id or account_id
    for name, value in (('signer', account_id), ('target', target)):
        if not is_valid_account_id(value):
            raise ConfigurationError(f"Invalid {name} account id", {'account_id': value})

    if args.confirm and not await asyncio.to_thread(confirm, target):
        logger.info("Deployment cancelled")
        return 0

    rpc_url = resolve_rpc_url(args, target)

    async with NearClient(account_id, rpc_url, private_key=private_key) as client:
        orchestrator = DeploymentOrchestrator(
            client,
            signer_id=account_id,
            bin_dir=args.bin_dir,
            media_extension=args.media_extension,
        )
        result = await orchestrator.deploy(target)

    report(result)
    return 0 if result.succeeded else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    if args.env_file:
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    configure_logging(args.log_file)

    try:
        return asyncio.run(run(args))
    except (DeploymentError, OSError) as e:
        logger.error(f"Deployment failed: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
