"""
Unit Tests for the Deployment CLI
"""

import threading

import pytest
from unittest.mock import AsyncMock, patch

from blockchain.exceptions import ConfigurationError
from deployer import cli


@pytest.fixture
def env(monkeypatch):
    for var in ("NEAR_ACCOUNT_ID", "NEAR_PRIVATE_KEY", "NEAR_RPC_URL", "NEAR_ENV", "CONTRACT_BIN_DIR"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def patched_client(client):
    """NearClient replacement usable as an async context manager"""
    context = AsyncMock()
    context.__aenter__.return_value = client
    context.__aexit__.return_value = False
    return patch("deployer.cli.NearClient", return_value=context)


class TestParseArgs:
    """Test argument parsing"""

    def test_no_target(self):
        args = cli.parse_args([])

        assert args.contract_id is None
        assert not args.confirm

    def test_target_and_flags(self):
        args = cli.parse_args(["bob.testnet", "--media-extension", "jpg", "--confirm"])

        assert args.contract_id == "bob.testnet"
        assert args.media_extension == "jpg"
        assert args.confirm

    def test_no_private_key_flag(self, capsys):
        with pytest.raises(SystemExit):
            cli.parse_args(["--private-key", "ed25519:secret"])

        assert "unrecognized arguments" in capsys.readouterr().err


class TestResolveRpcUrl:
    """Test RPC endpoint selection"""

    def test_flag_wins(self, env):
        env.setenv("NEAR_RPC_URL", "https://env.example")
        args = cli.parse_args(["--rpc-url", "https://flag.example"])

        assert cli.resolve_rpc_url(args, "bob.testnet") == "https://flag.example"

    def test_env_url(self, env):
        env.setenv("NEAR_RPC_URL", "https://env.example")

        assert cli.resolve_rpc_url(cli.parse_args([]), "bob.testnet") == "https://env.example"

    def test_guessed_from_target(self, env):
        args = cli.parse_args([])

        assert cli.resolve_rpc_url(args, "bob.testnet") == "https://rpc.testnet.near.org"
        assert cli.resolve_rpc_url(args, "alice.near") == "https://rpc.mainnet.near.org"

    def test_near_env_override(self, env):
        env.setenv("NEAR_ENV", "testnet")

        assert cli.resolve_rpc_url(cli.parse_args([]), "alice.near") == "https://rpc.testnet.near.org"


class TestRun:
    """Test the CLI flow end to end with a mocked client"""

    @pytest.mark.asyncio
    async def test_missing_credentials(self, env):
        with pytest.raises(ConfigurationError):
            await cli.run(cli.parse_args([]))

    @pytest.mark.asyncio
    async def test_invalid_target(self, env):
        env.setenv("NEAR_ACCOUNT_ID", "alice.near")
        env.setenv("NEAR_PRIVATE_KEY", "ed25519:secret")

        with pytest.raises(ConfigurationError):
            await cli.run(cli.parse_args(["Not Valid"]))

    @pytest.mark.asyncio
    async def test_deploys_to_signer_by_default(self, env, client, bin_dir, capsys):
        env.setenv("NEAR_ACCOUNT_ID", "alice.near")
        env.setenv("NEAR_PRIVATE_KEY", "ed25519:secret")

        with patched_client(client) as near_client:
            code = await cli.run(cli.parse_args(["--bin-dir", str(bin_dir)]))

        assert code == 0
        near_client.assert_called_once_with(
            "alice.near", "https://rpc.mainnet.near.org", private_key="ed25519:secret"
        )
        tx = client.sign_and_send.await_args.args[0]
        assert tx.receiver_id == "alice.near"
        assert len(tx.actions) == 2
        assert "deployed alice.near" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_confirmation_declined(self, env, client, bin_dir):
        env.setenv("NEAR_ACCOUNT_ID", "alice.near")
        env.setenv("NEAR_PRIVATE_KEY", "ed25519:secret")

        with patched_client(client), patch("builtins.input", return_value="no"):
            code = await cli.run(cli.parse_args(["bob.testnet", "--confirm", "--bin-dir", str(bin_dir)]))

        assert code == 0
        client.sign_and_send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_confirmation_accepted_off_event_loop(self, env, client, bin_dir):
        env.setenv("NEAR_ACCOUNT_ID", "alice.near")
        env.setenv("NEAR_PRIVATE_KEY", "ed25519:secret")
        prompt_threads = []

        def answer(prompt):
            prompt_threads.append(threading.current_thread())
            return "yes"

        with patched_client(client), patch("builtins.input", side_effect=answer):
            code = await cli.run(cli.parse_args(["bob.testnet", "--confirm", "--bin-dir", str(bin_dir)]))

        assert code == 0
        client.sign_and_send.assert_awaited_once()
        assert prompt_threads and prompt_threads[0] is not threading.main_thread()


class TestMain:
    """Test process exit codes"""

    def test_missing_credentials_exit_code(self, env, tmp_path):
        env.chdir(tmp_path)

        with patch("deployer.cli.configure_logging"):
            assert cli.main([]) == 1

    def test_missing_binary_exit_code(self, env, client, tmp_path):
        env.chdir(tmp_path)
        env.setenv("NEAR_ACCOUNT_ID", "alice.near")
        env.setenv("NEAR_PRIVATE_KEY", "ed25519:secret")

        with patched_client(client), patch("deployer.cli.configure_logging"):
            code = cli.main(["--bin-dir", str(tmp_path / "missing")])

        assert code == 1
        client.sign_and_send.assert_not_awaited()
