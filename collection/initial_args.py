"""
Initialization Arguments
Owner, metadata, collection size and sale terms for the contract initializer
"""

from dataclasses import dataclass
from typing import Dict, Optional

from blockchain.exceptions import ConfigurationError
from utils.network import is_valid_account_id
from .metadata import InitialMetadata, METADATA
from .sale import Sale, SALE, sale_for_network


COLLECTION_SIZE = 120


@dataclass(frozen=True)
class InitialArgs:
    owner_id: str
    metadata: InitialMetadata
    size: int
    sale: Sale
    media_extension: Optional[str] = None

    def validate(self):
        """Reject configurations the contract would refuse"""
        if not is_valid_account_id(self.owner_id):
            raise ConfigurationError("Invalid owner account id", {'owner_id': self.owner_id})

        if self.size <= 0:
            raise ConfigurationError("Collection size must be positive", {'size': self.size})

        if self.media_extension is not None and self.media_extension.startswith('.'):
            raise ConfigurationError(
                "Media extension must not start with '.'",
                {'media_extension': self.media_extension}
            )

        self.metadata.validate()
        self.sale.validate()

    def to_json(self) -> Dict:
        data = {
            'owner_id': self.owner_id,
            'metadata': self.metadata.to_json(),
            'size': self.size,
            'sale': self.sale.to_json(),
        }
        if self.media_extension is not None:
            data['media_extension'] = self.media_extension
        return data


def build_initial_args(
    owner_id: str,
    testnet: bool,
    now: Optional[int] = None,
    media_extension: Optional[str] = None,
    sale: Sale = SALE,
    metadata: InitialMetadata = METADATA,
    size: int = COLLECTION_SIZE
) -> InitialArgs:
    """
    Assemble initialization arguments for the target network

    Args:
        owner_id: Account that will own the collection
        testnet: Whether the target is a test-network account
        now: Current time in ms, used for the test-network sale start
        media_extension: Optional media file extension (without the dot)

    Returns:
        InitialArgs built from the network-specific sale terms
    """
    return InitialArgs(
        owner_id=owner_id,
        metadata=metadata,
        size=size,
        sale=sale_for_network(sale, testnet, now),
        media_extension=media_extension,
    )
