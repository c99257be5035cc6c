"""
Unit Parsing
Converts human-readable NEAR amounts and gas budgets into integers
"""

import re


YOCTO_PER_NEAR = 10 ** 24

# unit -> power of ten in base units
NEAR_UNITS = {
    'N': 24,
    'NEAR': 24,
    'mN': 21,
    'yN': 0,
    'yocto': 0,
}

GAS_UNITS = {
    'gas': 0,
    'Ggas': 9,
    'Tgas': 12,
}

_AMOUNT_RE = re.compile(r'^\s*([0-9][0-9_]*)(?:\.([0-9_]+))?\s*([A-Za-z]*)\s*$')


def _parse(text: str, units: dict, default_unit: str) -> int:
    match = _AMOUNT_RE.match(text)
    if not match:
        raise ValueError(f"Cannot parse amount: {text!r}")

    whole, fraction, unit = match.groups()
    unit = unit or default_unit

    if unit not in units:
        raise ValueError(f"Unknown unit {unit!r} in {text!r}")

    exponent = units[unit]
    whole = whole.replace('_', '')
    fraction = (fraction or '').replace('_', '').rstrip('0')

    if len(fraction) > exponent:
        raise ValueError(f"{text!r} is not a whole number of base units")

    return int(whole + fraction.ljust(exponent, '0'))


def parse_near(text: str) -> int:
    """
    Parse a NEAR amount such as "5 N" or "8 mN"

    Returns:
        Amount in yoctoNEAR
    """
    return _parse(text, NEAR_UNITS, 'N')


def parse_gas(text: str) -> int:
    """
    Parse a gas amount such as "50 Tgas"

    Returns:
        Amount in gas units
    """
    return _parse(text, GAS_UNITS, 'gas')
