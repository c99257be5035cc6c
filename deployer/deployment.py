"""
Deployment Orchestrator
Deploys the TenK contract and, on redeploys, re-initializes it
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from blockchain.outcome import TransactionOutcome
from collection import InitialArgs, build_initial_args
from collection.sale import now_ms
from utils.network import explorer_url, is_testnet
from utils.paths import bin_path
from utils.units import parse_gas


CONTRACT_NAME = 'tenk'
INIT_METHOD = 'new_default_meta'
INIT_GAS = parse_gas("50 Tgas")


@dataclass(frozen=True)
class DeploymentResult:
    contract_id: str
    testnet: bool
    initialized: bool
    transaction_hash: str
    explorer_url: str
    outcome: TransactionOutcome

    @property
    def succeeded(self) -> bool:
        return self.outcome.succeeded


class DeploymentOrchestrator:
    """
    Runs one deployment end to end:
    resolve target -> derive sale terms -> read binary -> build tx -> send
    """

    def __init__(
        self,
        client,
        signer_id: str,
        contract_name: str = CONTRACT_NAME,
        bin_dir: Optional[Path] = None,
        media_extension: Optional[str] = None,
        clock: Callable[[], int] = now_ms
    ):
        """
        Initialize Deployment Orchestrator

        Args:
            client: NearClient (or anything with the same coroutine API)
            signer_id: Account signing the transaction and owning the collection
            contract_name: Name of the compiled contract binary
            bin_dir: Directory holding compiled binaries
            media_extension: Optional media extension forwarded to the initializer
            clock: Returns the current time in ms
        """
        self.client = client
        self.signer_id = signer_id
        self.contract_name = contract_name
        self.bin_dir = bin_dir
        self.media_extension = media_extension
        self.clock = clock

    def resolve_target(self, contract_id: Optional[str] = None) -> str:
        return contract_id or self.signer_id

    def initial_args(self, testnet: bool) -> InitialArgs:
        """Network-specific initialization arguments, validated"""
        args = build_initial_args(
            owner_id=self.signer_id,
            testnet=testnet,
            now=self.clock(),
            media_extension=self.media_extension,
        )
        args.validate()
        return args

    def load_contract(self) -> bytes:
        """Read the compiled contract; a missing file is fatal"""
        path = bin_path(self.contract_name, self.bin_dir)
        code = path.read_bytes()
        logger.info(f"Loaded {path} ({len(code)} bytes)")
        return code

    async def deploy(self, contract_id: Optional[str] = None) -> DeploymentResult:
        """
        Deploy the contract to the target account

        The initializer call is appended only when the target already has
        a contract, so a redeploy resets the collection state in the same
        transaction.

        Args:
            contract_id: Target account (default: signer account)

        Returns:
            DeploymentResult
        """
        target = self.resolve_target(contract_id)
        testnet = is_testnet(target)

        logger.info(f"Deploying {self.contract_name} to {target} ({'testnet' if testnet else 'mainnet'})")

        initial_args = self.initial_args(testnet)
        code = self.load_contract()

        tx = self.client.create_transaction(target).deploy_contract(code)

        initialized = await self.client.has_deployed_contract(target)
        if initialized:
            args_json = initial_args.to_json()
            logger.info(f"initializing with: \n{json.dumps(args_json, indent=2)}")
            tx.function_call(INIT_METHOD, args_json, gas=INIT_GAS)

        outcome = await self.client.sign_and_send(tx)

        return DeploymentResult(
            contract_id=target,
            testnet=testnet,
            initialized=initialized,
            transaction_hash=outcome.transaction_hash,
            explorer_url=explorer_url(outcome.transaction_hash, testnet),
            outcome=outcome,
        )


def report(result: DeploymentResult):
    """Print the explorer link and deployment status"""
    print(result.explorer_url)

    if result.succeeded:
        print(f"deployed {result.contract_id}")
        logger.success(f"✅ Deployed {result.contract_id}")
    else:
        outcome = result.outcome
        details = outcome.raw if outcome.raw is not None else getattr(outcome.status, 'raw', None)
        print(json.dumps(details, indent=2, default=str))
        logger.error(f"❌ Deployment to {result.contract_id} did not succeed")
