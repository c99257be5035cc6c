"""
Sale Terms
Price, allowance, sale start and royalty splits for the collection

The module-level SALE value is never modified. Network-specific terms are
derived with sale_for_network(), which returns a new Sale.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Dict, Optional

from blockchain.exceptions import ConfigurationError
from utils.network import is_valid_account_id
from utils.units import parse_near


BASIS_POINTS = 10_000

# Largest timestamp representable as a JS Date, in ms
MAX_DATE = 8_640_000_000_000_000


def timestamp_ms(moment: datetime) -> int:
    """Milliseconds since the UNIX epoch"""
    return int(moment.timestamp() * 1000)


def now_ms() -> int:
    return timestamp_ms(datetime.now(timezone.utc))


@dataclass(frozen=True)
class Royalties:
    """
    Royalty split

    percent: share of each payment routed to royalties, in basis points
    accounts: beneficiary -> share of the royalty amount, in basis points
    """

    percent: int
    accounts: Dict[str, int] = field(default_factory=dict)

    def validate(self, label: str = 'royalties'):
        if not 0 <= self.percent <= BASIS_POINTS:
            raise ConfigurationError(
                f"{label} percent must be between 0 and {BASIS_POINTS} basis points",
                {'percent': self.percent}
            )

        if not self.accounts:
            raise ConfigurationError(f"{label} must name at least one beneficiary")

        for account_id, share in self.accounts.items():
            if not is_valid_account_id(account_id):
                raise ConfigurationError(f"Invalid {label} beneficiary", {'account': account_id})
            if share <= 0:
                raise ConfigurationError(f"{label} shares must be positive", {'account': account_id})

        total = sum(self.accounts.values())
        if total != BASIS_POINTS:
            raise ConfigurationError(
                f"{label} shares must add up to {BASIS_POINTS} basis points",
                {'total': total}
            )

    def to_json(self) -> Dict:
        return {
            'percent': self.percent,
            'accounts': dict(self.accounts),
        }


@dataclass(frozen=True)
class Sale:
    """Sale terms handed to the contract's initializer"""

    price: int
    allowance: Optional[int] = None
    public_sale_start: Optional[int] = None
    initial_royalties: Optional[Royalties] = None
    royalties: Optional[Royalties] = None
    presale_start: Optional[int] = None
    presale_price: Optional[int] = None
    mint_rate_limit: Optional[int] = None

    def validate(self):
        if self.price < 0:
            raise ConfigurationError("Sale price must not be negative", {'price': self.price})

        if self.presale_price is not None and self.presale_price < 0:
            raise ConfigurationError("Presale price must not be negative")

        if self.allowance is not None and self.allowance < 0:
            raise ConfigurationError("Allowance must not be negative", {'allowance': self.allowance})

        if self.mint_rate_limit is not None and self.mint_rate_limit <= 0:
            raise ConfigurationError("Mint rate limit must be positive")

        for name in ('public_sale_start', 'presale_start'):
            value = getattr(self, name)
            if value is not None and not 0 <= value <= MAX_DATE:
                raise ConfigurationError(f"{name} is out of range", {name: value})

        if self.initial_royalties is not None:
            self.initial_royalties.validate('initial_royalties')

        if self.royalties is not None:
            self.royalties.validate('royalties')

    def to_json(self) -> Dict:
        data = {
            'price': str(self.price),
            'allowance': self.allowance,
            'public_sale_start': self.public_sale_start,
            'initial_royalties': self.initial_royalties.to_json() if self.initial_royalties else None,
            'royalties': self.royalties.to_json() if self.royalties else None,
        }

        if self.presale_start is not None:
            data['presale_start'] = self.presale_start
        if self.presale_price is not None:
            data['presale_price'] = str(self.presale_price)
        if self.mint_rate_limit is not None:
            data['mint_rate_limit'] = self.mint_rate_limit

        return data


def sale_for_network(sale: Sale, testnet: bool, now: Optional[int] = None) -> Sale:
    """
    Derive the sale terms for the target network

    On test networks there are no initial royalties and the public sale
    opens immediately.

    Args:
        sale: Base sale terms
        testnet: Whether the target is a test-network account
        now: Current time in ms (default: wall clock)

    Returns:
        New Sale value; the input is left untouched
    """
    if not testnet:
        return sale

    return replace(
        sale,
        initial_royalties=None,
        public_sale_start=now if now is not None else now_ms(),
    )


DAO_SPLIT = {
    "tenk.sputnik-dao.near": 2_500,
    "project.sputnik-dao.near": 7_500,
}

PUBLIC_SALE_START = timestamp_ms(datetime(2022, 4, 27, 18, 0, tzinfo=timezone.utc))

SALE = Sale(
    price=parse_near("5 N"),
    allowance=3,
    public_sale_start=PUBLIC_SALE_START,
    initial_royalties=Royalties(percent=10_000, accounts=dict(DAO_SPLIT)),
    royalties=Royalties(percent=1_000, accounts=dict(DAO_SPLIT)),
)
