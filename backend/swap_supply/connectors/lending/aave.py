"""
Aave lending pool connector
"""
from typing import Optional
import logging

from swap_supply.config.constants import AAVE_LENDING_POOL_ABI, AAVE_SUPPLY_FUNCTIONS
from swap_supply.connectors.tokens.erc20 import ERC20Token
from swap_supply.core.base_connector import BaseContractConnector
from swap_supply.core.data_models import SupplyParams, SupplyResult
from swap_supply.core.exceptions import ConfigurationError
from swap_supply.core.wallet import WalletClient


logger = logging.getLogger(__name__)


class AaveLendingPool(BaseContractConnector):
    """Aave lending pool (V2 ``deposit`` or V3 ``supply``)"""

    def __init__(self, address: str, wallet: WalletClient, supply_function: str = "deposit"):
        if supply_function not in AAVE_SUPPLY_FUNCTIONS:
            raise ConfigurationError(
                f"Unknown lending pool function {supply_function!r}",
                code="invalid_supply_function"
            )

        super().__init__(
            name="Aave_Lending_Pool",
            address=address,
            abi_name=AAVE_LENDING_POOL_ABI,
            wallet=wallet
        )
        self.supply_function = supply_function

    def build_supply_params(
        self,
        asset: str,
        amount: int,
        on_behalf_of: Optional[str] = None,
        referral_code: int = 0
    ) -> SupplyParams:
        return SupplyParams(
            asset=asset,
            amount=amount,
            on_behalf_of=on_behalf_of or self.wallet.address,
            referral_code=referral_code
        )

    async def supply(
        self,
        token: ERC20Token,
        amount: int,
        on_behalf_of: Optional[str] = None,
        referral_code: int = 0,
        approve_gas: Optional[int] = None,
        supply_gas: Optional[int] = None
    ) -> SupplyResult:
        """Approve the pool for amount of token, deposit it and wait"""
        params = self.build_supply_params(token.address, amount, on_behalf_of, referral_code)

        # Approve lending pool to spend token
        logger.info(f"Approving {token.name} for Aave supply...", extra={"step": "approve_supply"})
        approval = await token.approve(self.address, amount, gas=approve_gas)

        logger.info(f"Supplying {token.name} to Aave...", extra={"step": "supply"})
        pool_function = getattr(self.functions, self.supply_function)
        supply = await self._transact(
            pool_function(*params.to_contract_args()),
            f"Aave {self.supply_function}",
            gas=supply_gas
        )
        logger.info(f"Supply Transaction: {supply.explorer_url}", extra={"step": "supply", "tx_hash": supply.tx_hash})

        return SupplyResult(
            approval=approval,
            supply=supply,
            asset=params.asset,
            amount=amount
        )
