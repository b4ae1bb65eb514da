"""
Swap a stablecoin on Uniswap, then supply the proceeds to Aave
"""
import logging
from decimal import Decimal
from typing import Optional

from web3 import Web3

from swap_supply.config.settings import Settings, settings as default_settings
from swap_supply.core.data_models import ExecutionSummary, SupplyResult, SwapResult
from swap_supply.core.exceptions import InsufficientBalanceError
from swap_supply.core.service_manager import ServiceManager
from swap_supply.utils.helpers import format_units, parse_units

logger = logging.getLogger(__name__)


async def swap(services: ServiceManager, amount_in: int) -> SwapResult:
    """Swap amount_in of the input token for the output token"""
    cfg = services.settings

    if cfg.CHECK_BALANCE:
        balance = await services.token_in.balance_of()
        if balance < amount_in:
            raise InsufficientBalanceError(
                f"{services.token_in.name} balance {balance} is below swap amount {amount_in}",
                code="insufficient_balance"
            )

    result = await services.router.swap_exact_input_single(
        services.token_in,
        services.token_out,
        amount_in,
        fee=cfg.UNISWAP_POOL_FEE,
        amount_out_minimum=cfg.AMOUNT_OUT_MINIMUM,
        sqrt_price_limit_x96=cfg.SQRT_PRICE_LIMIT_X96,
        approve_gas=cfg.APPROVE_GAS_LIMIT,
        swap_gas=cfg.SWAP_GAS_LIMIT
    )
    logger.info(f"Received {result.amount_out} base units of {services.token_out.name}")
    return result


async def supply(services: ServiceManager, amount: int) -> SupplyResult:
    """Deposit amount of the output token into the lending pool"""
    cfg = services.settings
    return await services.lending_pool.supply(
        services.token_out,
        amount,
        referral_code=cfg.AAVE_REFERRAL_CODE,
        approve_gas=cfg.APPROVE_GAS_LIMIT,
        supply_gas=cfg.SUPPLY_GAS_LIMIT
    )


async def run_swap_and_supply(services: ServiceManager, amount_in: int) -> ExecutionSummary:
    """Swap, then supply exactly what the swap returned"""
    swap_result = await swap(services, amount_in)
    supply_result = await supply(services, swap_result.amount_out)
    return ExecutionSummary(swap=swap_result, supply=supply_result)


async def _resolve_amount(services: ServiceManager, amount: Decimal) -> int:
    decimals = services.settings.TOKEN_IN_DECIMALS
    if decimals is None:
        decimals = await services.token_in.decimals()
    return parse_units(amount, decimals)


async def execute(
    settings: Optional[Settings] = None,
    amount: Optional[Decimal] = None,
    w3: Optional[Web3] = None
) -> int:
    """
    Run the whole flow once and report an exit status

    Any failure is logged and turned into status 1; nothing is retried.
    """
    cfg = settings or default_settings
    amount = cfg.SWAP_AMOUNT if amount is None else amount

    try:
        async with ServiceManager(cfg, w3=w3) as services:
            amount_in = await _resolve_amount(services, amount)
            # Nothing after the transactions reads the chain
            out_decimals = await services.token_out.decimals()
            logger.info(f"Swapping {amount} {services.token_in.name} ({amount_in} base units)")

            summary = await run_swap_and_supply(services, amount_in)

            logger.info(
                f"Supplied {format_units(summary.supply.amount, out_decimals)} "
                f"{services.token_out.name} to Aave"
            )
    except Exception as e:
        logger.exception(f"An error occurred: {e}")
        return 1

    return 0
