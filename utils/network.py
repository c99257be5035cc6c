"""
Network Helpers
Test/production classification, account id rules and explorer links
"""

import re


TESTNET_SUFFIX = 'testnet'

RPC_URLS = {
    'mainnet': 'https://rpc.mainnet.near.org',
    'testnet': 'https://rpc.testnet.near.org',
}

_ACCOUNT_ID_RE = re.compile(r'^(([a-z\d]+[-_])*[a-z\d]+\.)*([a-z\d]+[-_])*[a-z\d]+$')


def is_testnet(account_id: str) -> bool:
    """An account lives on the test network iff its id ends with 'testnet'"""
    return account_id.endswith(TESTNET_SUFFIX)


def is_valid_account_id(account_id: str) -> bool:
    """NEAR account id rules: 2-64 chars, lowercase alphanumerics separated by '-', '_' or '.'"""
    if not isinstance(account_id, str) or not 2 <= len(account_id) <= 64:
        return False
    return bool(_ACCOUNT_ID_RE.match(account_id))


def network_name(testnet: bool) -> str:
    return 'testnet' if testnet else 'mainnet'


def default_rpc_url(testnet: bool) -> str:
    return RPC_URLS[network_name(testnet)]


def explorer_url(tx_hash: str, testnet: bool) -> str:
    """Explorer link for a submitted transaction"""
    subdomain = '.testnet' if testnet else ''
    return f"https://explorer{subdomain}.near.org/transactions/{tx_hash}"
