"""
ERC-20 token connector
"""
from typing import Any, List, Optional
import logging

from web3 import Web3
from web3.logs import DISCARD

from swap_supply.config.constants import ERC20_ABI
from swap_supply.core.base_connector import BaseContractConnector
from swap_supply.core.data_models import TransactionResult
from swap_supply.core.wallet import WalletClient


logger = logging.getLogger(__name__)


class ERC20Token(BaseContractConnector):
    """ERC-20 token bound to the signing wallet"""

    def __init__(self, address: str, wallet: WalletClient, symbol: Optional[str] = None):
        super().__init__(
            name=symbol or "ERC20",
            address=address,
            abi_name=ERC20_ABI,
            wallet=wallet
        )
        self._symbol = symbol
        self._decimals: Optional[int] = None

    async def approve(
        self,
        spender: str,
        amount: int,
        gas: Optional[int] = None
    ) -> TransactionResult:
        """Approve spender for amount and wait for confirmation"""
        spender = Web3.to_checksum_address(spender)
        return await self._transact(
            self.functions.approve(spender, amount),
            f"Approve {self.name}",
            gas=gas
        )

    async def balance_of(self, owner: Optional[str] = None) -> int:
        owner = Web3.to_checksum_address(owner or self.wallet.address)
        return self.functions.balanceOf(owner).call()

    async def allowance(self, spender: str, owner: Optional[str] = None) -> int:
        owner = Web3.to_checksum_address(owner or self.wallet.address)
        return self.functions.allowance(owner, Web3.to_checksum_address(spender)).call()

    async def decimals(self) -> int:
        if self._decimals is None:
            self._decimals = self.functions.decimals().call()
        return self._decimals

    async def symbol(self) -> str:
        if self._symbol is None:
            self._symbol = self.functions.symbol().call()
        return self._symbol

    def transfers_to(self, receipt: Any, recipient: str) -> List[int]:
        """
        Amounts of this token transferred to recipient in a receipt

        Logs emitted by other contracts in the same receipt are ignored.
        """
        recipient = Web3.to_checksum_address(recipient)
        events = self.contract.events.Transfer().process_receipt(receipt, errors=DISCARD)

        amounts = []
        for event in events:
            if Web3.to_checksum_address(event["address"]) != self.address:
                continue
            if Web3.to_checksum_address(event["args"]["to"]) == recipient:
                amounts.append(event["args"]["value"])
        return amounts
