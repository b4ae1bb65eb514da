"""
Base connector class for contract integrations
Provides common interface and functionality
"""
from typing import Optional
import logging

from web3 import Web3

from swap_supply.core.abi_loader import load_abi
from swap_supply.core.data_models import TransactionResult
from swap_supply.core.wallet import WalletClient


logger = logging.getLogger(__name__)


class BaseContractConnector:
    """Base class for all contract connectors"""

    def __init__(
        self,
        name: str,
        address: str,
        abi_name: str,
        wallet: WalletClient
    ):
        self.name = name
        self.address = Web3.to_checksum_address(address)
        self.abi_name = abi_name
        self.wallet = wallet
        self._contract = None

        logger.info(f"Initialized {name} connector at {self.address}")

    @property
    def contract(self):
        """Contract proxy, bound on first use"""
        if self._contract is None:
            self._contract = self.wallet.contract(self.address, load_abi(self.abi_name))
        return self._contract

    @property
    def functions(self):
        return self.contract.functions

    async def _transact(
        self,
        contract_function,
        description: str,
        gas: Optional[int] = None
    ) -> TransactionResult:
        """Send a state-changing call through the wallet"""
        return await self.wallet.send_transaction(contract_function, description, gas=gas)
