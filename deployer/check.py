"""
System Check
Verifies credentials, contract binary, collection config and RPC access before deploying
"""

import asyncio
import os
import sys
from decimal import Decimal

from dotenv import load_dotenv
from loguru import logger

from blockchain.exceptions import DeploymentError
from blockchain.near_client import NearClient
from collection import build_initial_args
from utils.network import default_rpc_url, is_testnet, is_valid_account_id
from utils.paths import bin_path
from utils.units import YOCTO_PER_NEAR
from .deployment import CONTRACT_NAME


def check_environment_variables() -> bool:
    """Check if all required environment variables are set"""
    logger.info("Checking environment variables...")

    required_vars = ['NEAR_ACCOUNT_ID', 'NEAR_PRIVATE_KEY']
    missing = [var for var in required_vars if not os.getenv(var)]

    if missing:
        logger.error(f"Missing environment variables: {', '.join(missing)}")
        return False

    account_id = os.getenv('NEAR_ACCOUNT_ID')
    if not is_valid_account_id(account_id):
        logger.error(f"NEAR_ACCOUNT_ID is not a valid account id: {account_id}")
        return False

    logger.success("✓ All environment variables set")
    return True


def check_contract_binary() -> bool:
    """Check the compiled contract is present"""
    path = bin_path(CONTRACT_NAME)
    logger.info(f"Checking contract binary at {path}...")

    if not path.is_file():
        logger.error(f"Contract binary not found: {path}")
        logger.info("Build the contract first (cargo build --target wasm32-unknown-unknown --release)")
        return False

    logger.success(f"✓ Contract binary found ({path.stat().st_size} bytes)")
    return True


def check_collection_config() -> bool:
    """Validate collection config as it would be sent to each network"""
    logger.info("Checking collection configuration...")

    owner_id = os.getenv('NEAR_ACCOUNT_ID') or 'owner.near'
    for testnet in (False, True):
        try:
            build_initial_args(owner_id, testnet).validate()
        except DeploymentError as e:
            logger.error(f"  {'testnet' if testnet else 'mainnet'}: {e}")
            return False

    logger.success("✓ Collection configuration valid")
    return True


async def check_account_state(account_id: str, rpc_url: str) -> bool:
    """Check the signer account exists and report its balance"""
    logger.info(f"Checking account {account_id} via {rpc_url}...")

    async with NearClient(account_id, rpc_url) as client:
        state = await client.view_account(account_id)
        deployed = await client.has_deployed_contract(account_id)

    balance = Decimal(state.get('amount', '0')) / YOCTO_PER_NEAR
    logger.info(f"  Balance: {balance:.4f} NEAR")
    logger.info(f"  Contract deployed: {'yes' if deployed else 'no'}")
    logger.success("✓ Account reachable")
    return True


def check_rpc_connection() -> bool:
    """Check RPC endpoint connection"""
    account_id = os.getenv('NEAR_ACCOUNT_ID')
    if not account_id:
        logger.warning("NEAR_ACCOUNT_ID not set, skipping")
        return False

    rpc_url = os.getenv('NEAR_RPC_URL') or default_rpc_url(is_testnet(account_id))
    return asyncio.run(check_account_state(account_id, rpc_url))


def main() -> int:
    """Run all system checks"""
    load_dotenv()

    logger.info("=" * 70)
    logger.info("TenK Deployment System Check")
    logger.info("=" * 70)

    checks = [
        ("Environment Variables", check_environment_variables),
        ("Contract Binary", check_contract_binary),
        ("Collection Configuration", check_collection_config),
        ("RPC Connection", check_rpc_connection)
    ]

    results = []

    for name, check_func in checks:
        logger.info("")
        try:
            result = check_func()
        except Exception as e:
            logger.error(f"Error in {name}: {e}")
            result = False
        results.append((name, result))

    # Summary
    logger.info("")
    logger.info("=" * 70)
    logger.info("Summary")
    logger.info("=" * 70)

    passed = sum(1 for _, result in results if result)
    total = len(results)

    for name, result in results:
        status = "✓ PASS" if result else "✗ FAIL"
        logger.info(f"  {status}: {name}")

    logger.info("")
    logger.info(f"Total: {passed}/{total} checks passed")

    if passed == total:
        logger.success("✅ Ready to deploy: python deploy.py [contract_id]")
        return 0

    logger.error("❌ Not ready - fix issues above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
