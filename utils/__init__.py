"""
Utilities Package
Unit parsing, network classification and contract paths
"""

from .units import parse_near, parse_gas
from .network import is_testnet, is_valid_account_id, explorer_url, default_rpc_url
from .paths import bin_path

__all__ = [
    'parse_near',
    'parse_gas',
    'is_testnet',
    'is_valid_account_id',
    'explorer_url',
    'default_rpc_url',
    'bin_path'
]
