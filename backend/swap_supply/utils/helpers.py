"""
Utility helper functions
"""
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from swap_supply.config.constants import EXPLORER_URLS, PLACEHOLDER_PREFIX
from swap_supply.core.data_models import Chain
from swap_supply.core.exceptions import DataValidationError


def parse_units(amount: Union[str, int, Decimal], decimals: int) -> int:
    """
    Convert a human-readable token amount into base units

    Examples:
        parse_units("10", 6) -> 10000000
        parse_units("1.5", 18) -> 1500000000000000000
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise DataValidationError(f"Invalid amount: {amount}")

    if not value.is_finite():
        raise DataValidationError(f"Invalid amount: {amount}")

    scaled = value.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise DataValidationError(
            f"Amount {amount} has more than {decimals} decimal places"
        )
    return int(scaled)


def format_units(amount: int, decimals: int) -> str:
    """Convert base units back to a human-readable string"""
    value = Decimal(amount).scaleb(-decimals)
    return format(value.normalize(), 'f')


def explorer_tx_url(tx_hash: str, chain: Chain, explorer_url: Optional[str] = None) -> str:
    """Block explorer link for a transaction"""
    base = (explorer_url or EXPLORER_URLS.get(chain, EXPLORER_URLS[Chain.ETHEREUM])).rstrip('/')
    return f"{base}/tx/{tx_hash}"


def is_placeholder_address(address: Optional[str]) -> bool:
    """Check if an address is still one of the 0xINSERT_... placeholders"""
    return bool(address) and address.upper().startswith(PLACEHOLDER_PREFIX.upper())
