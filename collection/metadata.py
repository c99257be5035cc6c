"""
Collection Metadata
Static description of the NFT collection passed to the contract on init
"""

from dataclasses import dataclass
from typing import Dict, Optional

from blockchain.exceptions import ConfigurationError
from .icon import ICON


NFT_METADATA_SPEC = 'nft-1.0.0'


@dataclass(frozen=True)
class InitialMetadata:
    """Collection-level NFT metadata"""

    uri: str
    name: str
    symbol: str
    icon: Optional[str] = None
    spec: Optional[str] = None
    reference: Optional[str] = None
    reference_hash: Optional[str] = None

    def validate(self):
        if not self.name or not self.symbol:
            raise ConfigurationError("Metadata name and symbol must not be empty")

        if not self.uri:
            raise ConfigurationError("Metadata uri must not be empty")

        if self.spec is not None and self.spec != NFT_METADATA_SPEC:
            raise ConfigurationError(
                "Unsupported metadata spec",
                {'spec': self.spec, 'expected': NFT_METADATA_SPEC}
            )

        # reference and its hash travel together
        if (self.reference is None) != (self.reference_hash is None):
            raise ConfigurationError("Metadata reference and reference_hash must be set together")

    def to_json(self) -> Dict:
        fields = {
            'uri': self.uri,
            'name': self.name,
            'symbol': self.symbol,
            'icon': self.icon,
            'spec': self.spec,
            'reference': self.reference,
            'reference_hash': self.reference_hash,
        }
        return {key: value for key, value in fields.items() if value is not None}


METADATA = InitialMetadata(
    uri="https://bafybeihnm54oute7a6ovuieegx6p5ukbsgqbdjltudhverb7ifcxcrypbu.ipfs.dweb.link",
    name="World of the Abyss (WOTA)",
    symbol="wotaverse",
    icon=ICON,
)
