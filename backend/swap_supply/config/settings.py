"""
Configuration settings for the swap-and-supply executor
Manages environment variables and application settings
"""
from decimal import Decimal
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

from swap_supply.core.data_models import Chain
from swap_supply.config.constants import (
    PLACEHOLDER_USDC_ADDRESS,
    PLACEHOLDER_LINK_ADDRESS,
    PLACEHOLDER_UNISWAP_ROUTER_ADDRESS,
    PLACEHOLDER_AAVE_LENDING_POOL_ADDRESS,
)


class Settings(BaseSettings):
    """Application configuration settings"""

    # Application
    APP_NAME: str = "Swap and Supply Executor"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Network
    RPC_URL: Optional[str] = None
    PRIVATE_KEY: Optional[str] = None
    CHAIN: Chain = Chain.SEPOLIA
    EXPLORER_URL: Optional[str] = None

    # Contract addresses (replace the placeholders before running)
    USDC_ADDRESS: str = PLACEHOLDER_USDC_ADDRESS
    LINK_ADDRESS: str = PLACEHOLDER_LINK_ADDRESS
    UNISWAP_ROUTER_ADDRESS: str = PLACEHOLDER_UNISWAP_ROUTER_ADDRESS
    AAVE_LENDING_POOL_ADDRESS: str = PLACEHOLDER_AAVE_LENDING_POOL_ADDRESS

    # Swap
    SWAP_AMOUNT: Decimal = Decimal("10")
    TOKEN_IN_DECIMALS: Optional[int] = 6  # read from the token when unset
    UNISWAP_POOL_FEE: int = 3000  # 0.3%
    AMOUNT_OUT_MINIMUM: int = 0
    SQRT_PRICE_LIMIT_X96: int = 0
    CHECK_BALANCE: bool = True

    # Lending
    AAVE_REFERRAL_CODE: int = 0
    AAVE_SUPPLY_FUNCTION: str = "deposit"  # "supply" on Aave V3 pools

    # Transactions
    TX_RECEIPT_TIMEOUT: int = 120  # seconds
    APPROVE_GAS_LIMIT: Optional[int] = None
    SWAP_GAS_LIMIT: Optional[int] = None
    SUPPLY_GAS_LIMIT: Optional[int] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
