"""
Input validation utilities
"""
from typing import List, Optional
import re

from swap_supply.config.constants import UNISWAP_FEE_TIERS, AAVE_SUPPLY_FUNCTIONS
from swap_supply.core.exceptions import ConfigurationError
from swap_supply.utils.helpers import is_placeholder_address


class AddressValidator:
    """Validate blockchain addresses"""

    @staticmethod
    def validate_ethereum_address(address: str) -> bool:
        """Validate Ethereum address format"""
        if not address:
            return False

        # Check format
        if not re.match(r'^0x[a-fA-F0-9]{40}$', address):
            return False

        return True

    @staticmethod
    def require_contract_address(name: str, address: Optional[str]) -> str:
        """Return the address or raise if it is missing, a placeholder or malformed"""
        if is_placeholder_address(address):
            raise ConfigurationError(
                f"{name} is still a placeholder ({address}); set it in the environment",
                code="placeholder_address"
            )

        if not AddressValidator.validate_ethereum_address(address):
            raise ConfigurationError(f"{name} is not a valid address: {address!r}", code="invalid_address")

        return address


class RangeValidator:
    """Validate numeric ranges"""

    @staticmethod
    def validate_non_negative(value: float) -> bool:
        """Validate non-negative number"""
        return value >= 0

    @staticmethod
    def validate_fee_tier(fee: int, tiers: List[int] = UNISWAP_FEE_TIERS) -> bool:
        """Validate Uniswap V3 pool fee tier"""
        return fee in tiers


class SettingsValidator:
    """Validate the settings needed before any transaction is sent"""

    @staticmethod
    def validate(settings) -> None:
        if not settings.RPC_URL:
            raise ConfigurationError("RPC_URL is not set", code="missing_rpc_url")

        if not settings.PRIVATE_KEY:
            raise ConfigurationError("PRIVATE_KEY is not set", code="missing_private_key")

        for name in (
            "USDC_ADDRESS",
            "LINK_ADDRESS",
            "UNISWAP_ROUTER_ADDRESS",
            "AAVE_LENDING_POOL_ADDRESS",
        ):
            AddressValidator.require_contract_address(name, getattr(settings, name))

        if not RangeValidator.validate_fee_tier(settings.UNISWAP_POOL_FEE):
            raise ConfigurationError(
                f"UNISWAP_POOL_FEE must be one of {UNISWAP_FEE_TIERS}, got {settings.UNISWAP_POOL_FEE}",
                code="invalid_fee_tier"
            )

        if not RangeValidator.validate_non_negative(settings.AMOUNT_OUT_MINIMUM):
            raise ConfigurationError("AMOUNT_OUT_MINIMUM must be non-negative", code="invalid_amount")

        if settings.AAVE_SUPPLY_FUNCTION not in AAVE_SUPPLY_FUNCTIONS:
            raise ConfigurationError(
                f"AAVE_SUPPLY_FUNCTION must be one of {AAVE_SUPPLY_FUNCTIONS}",
                code="invalid_supply_function"
            )
