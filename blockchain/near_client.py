"""
NEAR Client
Account queries over JSON-RPC and transaction signing via py-near
"""

from typing import Any, Dict, Optional, Tuple

import aiohttp
from loguru import logger
from py_near import transactions
from py_near.account import Account

from .exceptions import AccountNotFoundError, RPCError, TransactionError
from .outcome import TransactionOutcome, outcome_from_status
from .transaction_builder import DeployContract, FunctionCall, TransactionBuilder


# code_hash reported for accounts without a contract
EMPTY_CODE_HASH = '1' * 32


class NearClient:
    """
    Thin async wrapper around a NEAR RPC endpoint

    View queries go straight to the JSON-RPC API; signing and
    broadcasting are delegated to py-near.
    """

    def __init__(
        self,
        account_id: str,
        rpc_url: str,
        private_key: Optional[str] = None,
        timeout: float = 30
    ):
        """
        Initialize NEAR Client

        Args:
            account_id: Signer account id
            rpc_url: JSON-RPC endpoint
            private_key: ed25519 secret key of the signer ("ed25519:..."), needed only for sending
            timeout: Request timeout in seconds
        """
        self.account_id = account_id
        self.rpc_url = rpc_url
        self.private_key = private_key
        self.timeout = timeout

        self.session: Optional[aiohttp.ClientSession] = None
        self.account: Optional[Account] = None

        logger.debug(f"NEAR client for {account_id} via {rpc_url}")

    async def __aenter__(self) -> 'NearClient':
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def start(self):
        """Open the HTTP session"""
        if self.session is None:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )

    async def close(self):
        """Close the HTTP session"""
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def _rpc_query(self, params: Dict) -> Dict:
        """
        Run a JSON-RPC "query" request

        Args:
            params: Query parameters (request_type, finality, ...)

        Returns:
            Result object

        Raises:
            AccountNotFoundError: Queried account does not exist
            RPCError: Any other error payload
        """
        await self.start()

        payload = {
            'jsonrpc': '2.0',
            'id': 'dontcare',
            'method': 'query',
            'params': params,
        }

        async with self.session.post(self.rpc_url, json=payload) as response:
            response.raise_for_status()
            data = await response.json()

        error = data.get('error')
        if error:
            cause = (error.get('cause') or {}).get('name')
            message = error.get('data') or error.get('message') or 'RPC query failed'
            if cause == 'UNKNOWN_ACCOUNT':
                raise AccountNotFoundError(f"Account {params.get('account_id')} does not exist", error)
            raise RPCError(str(message), error)

        return data['result']

    async def view_account(self, account_id: str) -> Dict:
        """
        Fetch account state (balance, storage, code hash)

        Args:
            account_id: Account to look up

        Returns:
            view_account result
        """
        return await self._rpc_query({
            'request_type': 'view_account',
            'finality': 'final',
            'account_id': account_id,
        })

    async def has_deployed_contract(self, account_id: str) -> bool:
        """Whether the account currently has contract code"""
        state = await self.view_account(account_id)
        deployed = state.get('code_hash', EMPTY_CODE_HASH) != EMPTY_CODE_HASH

        logger.debug(f"{account_id} code_hash={state.get('code_hash')} deployed={deployed}")
        return deployed

    def create_transaction(self, receiver_id: str) -> TransactionBuilder:
        return TransactionBuilder(receiver_id)

    async def _signer(self) -> Account:
        if self.account is None:
            if not self.private_key:
                raise TransactionError("A private key is required to sign transactions", {'signer': self.account_id})

            self.account = Account(self.account_id, self.private_key, self.rpc_url)
            await self.account.startup()

        return self.account

    @staticmethod
    def _to_sdk_action(action):
        if isinstance(action, DeployContract):
            return transactions.create_deploy_contract_action(action.code)
        if isinstance(action, FunctionCall):
            return transactions.create_function_call_action(
                action.method_name, action.args, action.gas, action.deposit
            )
        raise TransactionError(f"Unsupported action: {type(action).__name__}")

    @staticmethod
    def _result_fields(result: Any) -> Tuple[str, Any]:
        """Transaction hash and final status from an SDK result"""
        if isinstance(result, dict):
            return result['transaction']['hash'], result.get('status')
        return result.transaction.hash, result.status

    async def sign_and_send(self, tx: TransactionBuilder) -> TransactionOutcome:
        """
        Sign the transaction with the signer key and broadcast it

        Args:
            tx: Assembled transaction

        Returns:
            TransactionOutcome with hash and tagged status
        """
        if not tx.actions:
            raise TransactionError("Transaction has no actions", {'receiver_id': tx.receiver_id})

        signer = await self._signer()
        actions = [self._to_sdk_action(action) for action in tx.actions]

        logger.info(f"Sending {len(actions)} action(s) to {tx.receiver_id}...")
        result = await signer.sign_and_submit_tx(tx.receiver_id, actions)

        tx_hash, status = self._result_fields(result)
        logger.info(f"Transaction sent: {tx_hash}")

        # plain-data copy of the SDK result, printable for diagnostics
        raw = {
            'transaction_hash': tx_hash,
            'receiver_id': tx.receiver_id,
            'status': status,
        }
        logs = result.get('logs') if isinstance(result, dict) else getattr(result, 'logs', None)
        if isinstance(logs, list):
            raw['logs'] = logs

        return TransactionOutcome(
            transaction_hash=tx_hash,
            status=outcome_from_status(status),
            raw=raw
        )
