"""
Tests for the swap-and-supply workflow
"""
import logging
from decimal import Decimal

import pytest
from unittest.mock import AsyncMock

from swap_supply.core.exceptions import ConfigurationError, InsufficientBalanceError
from swap_supply.core.service_manager import ServiceManager
from swap_supply.workers import swap_and_supply
from swap_supply.workers.swap_and_supply import execute, run_swap_and_supply, swap

from conftest import USDC, LINK, ROUTER, POOL, WALLET_ADDRESS, make_settings


LINK_OUT = 3 * 10**18


def wire_chain(w3, contracts, sent, usdc_balance=10**9, link_out=LINK_OUT):
    """Make every contract the flow touches answer like a healthy testnet"""
    for address in (USDC, LINK, ROUTER, POOL):
        w3.eth.contract(address=address, abi=[])

    contracts[USDC].functions.balanceOf.return_value.call.return_value = usdc_balance
    contracts[USDC].functions.decimals.return_value.call.return_value = 6
    contracts[LINK].functions.decimals.return_value.call.return_value = 18
    contracts[LINK].events.Transfer.return_value.process_receipt.return_value = [
        {"address": LINK, "args": {"from": ROUTER, "to": WALLET_ADDRESS, "value": link_out}}
    ]

    def build(description):
        def build_transaction(tx_params):
            sent.append(description)
            return {"description": description}
        return build_transaction

    contracts[USDC].functions.approve.return_value.build_transaction.side_effect = build("approve_usdc")
    contracts[LINK].functions.approve.return_value.build_transaction.side_effect = build("approve_link")
    contracts[ROUTER].functions.exactInputSingle.return_value.build_transaction.side_effect = build("swap")
    contracts[POOL].functions.deposit.return_value.build_transaction.side_effect = build("deposit")


@pytest.fixture
def sent():
    return []


@pytest.fixture
async def services(w3, contracts, sent):
    wire_chain(w3, contracts, sent)
    manager = ServiceManager(make_settings(), w3=w3)
    await manager.initialize()
    yield manager
    await manager.cleanup()


@pytest.mark.asyncio
async def test_service_manager_initialization(services):
    """Test the wallet and the four contracts are wired from settings"""
    assert services.wallet.is_connected
    assert services.token_in.address == USDC
    assert services.token_out.address == LINK
    assert services.router.address == ROUTER
    assert services.lending_pool.address == POOL
    assert services.lending_pool.supply_function == "deposit"


@pytest.mark.asyncio
async def test_service_manager_rejects_placeholders(w3):
    manager = ServiceManager(make_settings(LINK_ADDRESS="0xINSERT_LINK_CONTRACT_ADDRESS"), w3=w3)

    with pytest.raises(ConfigurationError):
        await manager.initialize()

    assert manager.wallet is None


@pytest.mark.asyncio
async def test_run_swap_and_supply_order(services, contracts, sent):
    """Test approve -> swap -> approve -> deposit, supplying exactly the swap output"""
    summary = await run_swap_and_supply(services, 10_000_000)

    assert sent == ["approve_usdc", "swap", "approve_link", "deposit"]

    contracts[USDC].functions.approve.assert_called_once_with(ROUTER, 10_000_000)
    (swap_args,), _ = contracts[ROUTER].functions.exactInputSingle.call_args
    assert swap_args == {
        "tokenIn": USDC,
        "tokenOut": LINK,
        "fee": 3000,
        "recipient": WALLET_ADDRESS,
        "amountIn": 10_000_000,
        "amountOutMinimum": 0,
        "sqrtPriceLimitX96": 0,
    }
    contracts[LINK].functions.approve.assert_called_once_with(POOL, LINK_OUT)
    contracts[POOL].functions.deposit.assert_called_once_with(LINK, LINK_OUT, WALLET_ADDRESS, 0)

    assert summary.swap.amount_out == LINK_OUT
    assert summary.supply.amount == LINK_OUT


@pytest.mark.asyncio
async def test_swap_insufficient_balance(w3, contracts, sent):
    """Test nothing is sent when the wallet cannot cover the swap"""
    wire_chain(w3, contracts, sent, usdc_balance=1)
    manager = ServiceManager(make_settings(), w3=w3)
    await manager.initialize()

    with pytest.raises(InsufficientBalanceError):
        await swap(manager, 10_000_000)

    assert sent == []


@pytest.mark.asyncio
async def test_swap_skips_balance_check(w3, contracts, sent):
    wire_chain(w3, contracts, sent, usdc_balance=0)
    manager = ServiceManager(make_settings(CHECK_BALANCE=False), w3=w3)
    await manager.initialize()

    result = await swap(manager, 10_000_000)

    assert sent == ["approve_usdc", "swap"]
    assert result.amount_out == LINK_OUT


@pytest.mark.asyncio
async def test_swap_failure_stops_flow(services, monkeypatch):
    """Test a failed swap never reaches the lending pool"""
    services.lending_pool.supply = AsyncMock()
    monkeypatch.setattr(
        services.router,
        "swap_exact_input_single",
        AsyncMock(side_effect=RuntimeError("swap reverted"))
    )

    with pytest.raises(RuntimeError):
        await run_swap_and_supply(services, 10_000_000)

    services.lending_pool.supply.assert_not_called()


@pytest.mark.asyncio
async def test_execute_success(w3, contracts, sent):
    """Test a full run converts SWAP_AMOUNT to base units and exits 0"""
    wire_chain(w3, contracts, sent)

    code = await execute(make_settings(SWAP_AMOUNT=Decimal("10")), w3=w3)

    assert code == 0
    assert sent == ["approve_usdc", "swap", "approve_link", "deposit"]
    contracts[USDC].functions.approve.assert_called_once_with(ROUTER, 10_000_000)


@pytest.mark.asyncio
async def test_execute_amount_override_reads_decimals(w3, contracts, sent):
    wire_chain(w3, contracts, sent)

    code = await execute(make_settings(TOKEN_IN_DECIMALS=None), amount=Decimal("2.5"), w3=w3)

    assert code == 0
    contracts[USDC].functions.decimals.assert_called_once_with()
    contracts[USDC].functions.approve.assert_called_once_with(ROUTER, 2_500_000)


@pytest.mark.asyncio
async def test_execute_logs_and_exits_on_error(w3, caplog):
    """Test the single catch-all turns any failure into exit status 1"""
    with caplog.at_level(logging.ERROR):
        code = await execute(make_settings(USDC_ADDRESS="0xINSERT_USDC_CONTRACT_ADDRESS"), w3=w3)

    assert code == 1
    assert "An error occurred" in caplog.text
    assert "USDC_ADDRESS" in caplog.text


@pytest.mark.asyncio
async def test_execute_swap_error(w3, contracts, sent, monkeypatch):
    wire_chain(w3, contracts, sent)
    monkeypatch.setattr(
        swap_and_supply,
        "supply",
        AsyncMock(side_effect=AssertionError("supply must not run"))
    )
    contracts[LINK].events.Transfer.return_value.process_receipt.return_value = []

    code = await execute(make_settings(), w3=w3)

    assert code == 1
    assert sent == ["approve_usdc", "swap"]
    swap_and_supply.supply.assert_not_called()


@pytest.mark.asyncio
async def test_execute_reads_output_decimals_before_sending(w3, contracts, sent):
    """Test the summary needs no chain reads once transactions are mined"""
    wire_chain(w3, contracts, sent)

    def link_decimals():
        sent.append("decimals_link")
        return 18

    contracts[LINK].functions.decimals.return_value.call.side_effect = link_decimals

    code = await execute(make_settings(), w3=w3)

    assert code == 0
    assert sent == ["decimals_link", "approve_usdc", "swap", "approve_link", "deposit"]


@pytest.mark.asyncio
async def test_execute_output_decimals_failure_sends_nothing(w3, contracts, sent):
    wire_chain(w3, contracts, sent)
    contracts[LINK].functions.decimals.return_value.call.side_effect = RuntimeError("rpc unavailable")

    code = await execute(make_settings(), w3=w3)

    assert code == 1
    assert sent == []
