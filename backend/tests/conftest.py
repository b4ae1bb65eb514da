"""
Shared fixtures: a mocked Web3 node and a wallet connected to it
"""
import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock

from eth_account import Account
from web3 import Web3

from swap_supply.config.settings import Settings
from swap_supply.core.data_models import Chain, TransactionResult
from swap_supply.core.wallet import WalletClient


# Well-known test key from the eth-account docs; never holds funds
PRIVATE_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"
WALLET_ADDRESS = Account.from_key(PRIVATE_KEY).address

USDC = Web3.to_checksum_address("0x" + "a1" * 20)
LINK = Web3.to_checksum_address("0x" + "b2" * 20)
ROUTER = Web3.to_checksum_address("0x" + "c3" * 20)
POOL = Web3.to_checksum_address("0x" + "d4" * 20)


def make_receipt(status: int = 1, block_number: int = 100, logs=None) -> dict:
    return {
        "status": status,
        "blockNumber": block_number,
        "gasUsed": 50_000,
        "logs": logs or [],
    }


def make_result(tx_hash: str = "0x" + "ab" * 32, receipt=None) -> TransactionResult:
    return TransactionResult(
        tx_hash=tx_hash,
        block_number=100,
        gas_used=50_000,
        status=1,
        explorer_url=f"https://sepolia.etherscan.io/tx/{tx_hash}",
        receipt=receipt or make_receipt()
    )


def make_settings(**overrides) -> Settings:
    values = dict(
        RPC_URL="http://localhost:8545",
        PRIVATE_KEY=PRIVATE_KEY,
        CHAIN=Chain.SEPOLIA,
        USDC_ADDRESS=USDC,
        LINK_ADDRESS=LINK,
        UNISWAP_ROUTER_ADDRESS=ROUTER,
        AAVE_LENDING_POOL_ADDRESS=POOL,
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def contracts():
    """Contract mocks keyed by checksum address"""
    return {}


@pytest.fixture
def w3(contracts):
    """Mocked Web3 instance talking to a Sepolia node"""
    mock_w3 = MagicMock()
    mock_w3.is_connected.return_value = True
    mock_w3.eth.chain_id = 11155111
    mock_w3.eth.get_transaction_count.return_value = 7
    mock_w3.eth.account.sign_transaction.return_value = SimpleNamespace(raw_transaction=b"\x02signed")
    mock_w3.eth.send_raw_transaction.return_value = b"\xab" * 32
    mock_w3.eth.wait_for_transaction_receipt.return_value = make_receipt()

    def contract(address, abi):
        if address not in contracts:
            contracts[address] = MagicMock(name=f"contract_{address}")
            contracts[address].address = address
        return contracts[address]

    mock_w3.eth.contract.side_effect = contract
    return mock_w3


@pytest.fixture
async def wallet(w3):
    """Wallet connected to the mocked node"""
    client = WalletClient(
        rpc_url="http://localhost:8545",
        private_key=PRIVATE_KEY,
        chain=Chain.SEPOLIA,
        w3=w3
    )
    await client.connect()
    return client


@pytest.fixture
def settings():
    return make_settings()
