"""
Uniswap V3 DEX connector implementation
Executes single-pool exact-input swaps through the swap router via Web3.py
"""
from typing import Optional
import logging

from swap_supply.config.constants import UNISWAP_ROUTER_ABI
from swap_supply.connectors.tokens.erc20 import ERC20Token
from swap_supply.core.base_connector import BaseContractConnector
from swap_supply.core.data_models import ExactInputSingleParams, SwapResult
from swap_supply.core.exceptions import SwapOutputNotFoundError
from swap_supply.core.wallet import WalletClient


logger = logging.getLogger(__name__)


class UniswapV3Router(BaseContractConnector):
    """Uniswap V3 swap router"""

    DEFAULT_FEE = 3000  # 0.3% pool

    def __init__(self, address: str, wallet: WalletClient):
        super().__init__(
            name="Uniswap_V3_Router",
            address=address,
            abi_name=UNISWAP_ROUTER_ABI,
            wallet=wallet
        )

    def build_swap_params(
        self,
        token_in: str,
        token_out: str,
        amount_in: int,
        recipient: Optional[str] = None,
        fee: int = DEFAULT_FEE,
        amount_out_minimum: int = 0,
        sqrt_price_limit_x96: int = 0
    ) -> ExactInputSingleParams:
        """Prepare exactInputSingle parameters, paying out to the wallet by default"""
        return ExactInputSingleParams(
            token_in=token_in,
            token_out=token_out,
            fee=fee,
            recipient=recipient or self.wallet.address,
            amount_in=amount_in,
            amount_out_minimum=amount_out_minimum,
            sqrt_price_limit_x96=sqrt_price_limit_x96
        )

    async def swap_exact_input_single(
        self,
        token_in: ERC20Token,
        token_out: ERC20Token,
        amount_in: int,
        recipient: Optional[str] = None,
        fee: int = DEFAULT_FEE,
        amount_out_minimum: int = 0,
        sqrt_price_limit_x96: int = 0,
        approve_gas: Optional[int] = None,
        swap_gas: Optional[int] = None
    ) -> SwapResult:
        """
        Approve the router, swap amount_in of token_in for token_out and wait

        Args:
            token_in: token being sold
            token_out: token being bought
            amount_in: amount of token_in in base units

        Returns:
            SwapResult with amount_out read from the token_out transfers in the receipt
        """
        params = self.build_swap_params(
            token_in.address,
            token_out.address,
            amount_in,
            recipient=recipient,
            fee=fee,
            amount_out_minimum=amount_out_minimum,
            sqrt_price_limit_x96=sqrt_price_limit_x96
        )

        # Approve router to spend token_in
        logger.info(f"Approving {token_in.name} for Uniswap swap...", extra={"step": "approve_swap"})
        approval = await token_in.approve(self.address, amount_in, gas=approve_gas)

        # Execute swap
        logger.info("Executing swap on Uniswap...", extra={"step": "swap"})
        swap = await self._transact(
            self.functions.exactInputSingle(params.to_contract_args()),
            "Uniswap exactInputSingle",
            gas=swap_gas
        )
        logger.info(f"Swap Transaction: {swap.explorer_url}", extra={"step": "swap", "tx_hash": swap.tx_hash})

        amounts = token_out.transfers_to(swap.receipt, params.recipient)
        if not amounts:
            raise SwapOutputNotFoundError(
                f"No {token_out.name} transfer to {params.recipient} in swap {swap.tx_hash}",
                code="no_output"
            )

        return SwapResult(
            approval=approval,
            swap=swap,
            token_in=token_in.address,
            token_out=token_out.address,
            amount_in=amount_in,
            amount_out=sum(amounts)
        )
