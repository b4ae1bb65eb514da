"""
Service Manager for dependency wiring and lifecycle management
"""
import logging
from typing import Optional

from web3 import Web3

from swap_supply.config.settings import Settings, settings as default_settings
from swap_supply.connectors.dex.uniswap import UniswapV3Router
from swap_supply.connectors.lending.aave import AaveLendingPool
from swap_supply.connectors.tokens.erc20 import ERC20Token
from swap_supply.core.wallet import WalletClient
from swap_supply.utils.validators import SettingsValidator

logger = logging.getLogger(__name__)


class ServiceManager:
    def __init__(self, settings: Optional[Settings] = None, w3: Optional[Web3] = None):
        self.settings = settings or default_settings
        self._w3 = w3

        # Wallet
        self.wallet: Optional[WalletClient] = None

        # Contracts
        self.token_in: Optional[ERC20Token] = None
        self.token_out: Optional[ERC20Token] = None
        self.router: Optional[UniswapV3Router] = None
        self.lending_pool: Optional[AaveLendingPool] = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.cleanup()

    async def initialize(self):
        """Validate settings, connect the wallet and bind the contracts"""
        logger.info("Initializing services...")
        SettingsValidator.validate(self.settings)

        self.wallet = WalletClient(
            rpc_url=self.settings.RPC_URL,
            private_key=self.settings.PRIVATE_KEY,
            chain=self.settings.CHAIN,
            receipt_timeout=self.settings.TX_RECEIPT_TIMEOUT,
            explorer_url=self.settings.EXPLORER_URL,
            w3=self._w3
        )
        await self.wallet.connect()

        self.token_in = ERC20Token(self.settings.USDC_ADDRESS, self.wallet, symbol="USDC")
        self.token_out = ERC20Token(self.settings.LINK_ADDRESS, self.wallet, symbol="LINK")
        self.router = UniswapV3Router(self.settings.UNISWAP_ROUTER_ADDRESS, self.wallet)
        self.lending_pool = AaveLendingPool(
            self.settings.AAVE_LENDING_POOL_ADDRESS,
            self.wallet,
            supply_function=self.settings.AAVE_SUPPLY_FUNCTION
        )

        logger.info("All services initialized successfully")

    async def cleanup(self):
        """Cleanup all services"""
        if self.wallet:
            await self.wallet.disconnect()

        logger.info("Cleanup completed")
