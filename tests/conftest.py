"""
Shared fixtures
"""

import pytest
from unittest.mock import Mock, AsyncMock

from blockchain.outcome import Success, TransactionOutcome
from blockchain.transaction_builder import TransactionBuilder


WASM = b"\x00asm\x01\x00\x00\x00tenk"


@pytest.fixture
def bin_dir(tmp_path):
    """Directory holding a fake compiled contract"""
    (tmp_path / "tenk.wasm").write_bytes(WASM)
    return tmp_path


@pytest.fixture
def empty_bin_dir(tmp_path):
    directory = tmp_path / "release"
    directory.mkdir()
    return directory


@pytest.fixture
def success_outcome():
    return TransactionOutcome(
        transaction_hash="9vXGzqZfWbXh5ZGzN6qJzPrx3hM5ZLZzJvN1sUt1A3Kq",
        status=Success(value=""),
        raw={"status": {"SuccessValue": ""}}
    )


@pytest.fixture
def client(success_outcome):
    """Mock NEAR client with an already-deployed contract"""
    client = Mock()
    client.create_transaction = Mock(side_effect=TransactionBuilder)
    client.has_deployed_contract = AsyncMock(return_value=True)
    client.sign_and_send = AsyncMock(return_value=success_outcome)
    return client
