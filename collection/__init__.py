"""
Collection Configuration Package
Metadata, sale terms and initialization arguments for the TenK contract
"""

from .metadata import InitialMetadata, METADATA, NFT_METADATA_SPEC
from .sale import Royalties, Sale, SALE, PUBLIC_SALE_START, sale_for_network
from .initial_args import InitialArgs, COLLECTION_SIZE, build_initial_args

__all__ = [
    'InitialMetadata',
    'METADATA',
    'NFT_METADATA_SPEC',
    'Royalties',
    'Sale',
    'SALE',
    'PUBLIC_SALE_START',
    'sale_for_network',
    'InitialArgs',
    'COLLECTION_SIZE',
    'build_initial_args'
]
