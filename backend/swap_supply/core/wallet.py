"""
Wallet and signing client
Wraps a Web3.py connection and a local account that signs every transaction
"""
import logging
from typing import Any, Dict, List, Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception
from web3.middleware import ExtraDataToPOAMiddleware

from swap_supply.config.constants import CHAIN_IDS, POA_CHAINS
from swap_supply.core.data_models import Chain, TransactionResult
from swap_supply.core.exceptions import (
    ConfigurationError,
    ConnectionError,
    ContractError,
    TransactionFailedError,
    TransactionTimeoutError,
)
from swap_supply.utils.helpers import explorer_tx_url


logger = logging.getLogger(__name__)


class WalletClient:
    """Signing client bound to one RPC endpoint and one private key"""

    def __init__(
        self,
        rpc_url: Optional[str],
        private_key: Optional[str],
        chain: Chain = Chain.SEPOLIA,
        receipt_timeout: int = 120,
        explorer_url: Optional[str] = None,
        w3: Optional[Web3] = None
    ):
        self.rpc_url = rpc_url
        self.chain = chain
        self.receipt_timeout = receipt_timeout
        self.explorer_url = explorer_url
        self.w3 = w3
        self._private_key = private_key
        self._account: Optional[LocalAccount] = None
        self._is_connected = False

    async def __aenter__(self):
        """Async context manager entry"""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit"""
        await self.disconnect()

    async def connect(self) -> None:
        """Open the RPC connection and load the signing account"""
        if self._is_connected:
            return

        if self.w3 is None:
            self.w3 = self._initialize_web3()

        if not self.w3.is_connected():
            raise ConnectionError(f"Failed to connect to {self.chain.value} RPC")

        self._check_chain_id()
        self._account = self._load_account()
        self._is_connected = True
        logger.info(f"Connected to {self.chain.value} as {self._account.address}")

    async def disconnect(self) -> None:
        """Drop the connection state"""
        if self._is_connected:
            self._is_connected = False
            logger.info(f"Disconnected from {self.chain.value}")

    def _initialize_web3(self) -> Web3:
        """Initialize Web3 connection"""
        if not self.rpc_url:
            raise ConfigurationError("RPC_URL is not set", code="missing_rpc_url")

        w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        if self.chain in POA_CHAINS:
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

        return w3

    def _check_chain_id(self) -> None:
        expected = CHAIN_IDS.get(self.chain)
        actual = self.w3.eth.chain_id
        if expected is not None and actual != expected:
            logger.warning(
                f"RPC reports chain id {actual}, expected {expected} for {self.chain.value}"
            )

    def _load_account(self) -> LocalAccount:
        if not self._private_key:
            raise ConfigurationError("PRIVATE_KEY is not set", code="missing_private_key")

        try:
            return Account.from_key(self._private_key)
        except (ValueError, TypeError):
            # the key itself must never end up in a message
            raise ConfigurationError("PRIVATE_KEY is not a valid private key", code="invalid_private_key")

    @property
    def address(self) -> str:
        """Checksum address of the signing account"""
        if self._account is None:
            raise ConnectionError("Wallet is not connected")
        return self._account.address

    @property
    def is_connected(self) -> bool:
        """Check if wallet is connected"""
        return self._is_connected

    def contract(self, address: str, abi: List[Dict[str, Any]]):
        """Bind a contract proxy at address"""
        if self.w3 is None:
            raise ConnectionError("Wallet is not connected")

        return self.w3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=abi
        )

    def tx_url(self, tx_hash: str) -> str:
        return explorer_tx_url(tx_hash, self.chain, self.explorer_url)

    async def send_transaction(
        self,
        contract_function,
        description: str,
        gas: Optional[int] = None
    ) -> TransactionResult:
        """
        Build, sign and send a contract call, then wait for its receipt

        Args:
            contract_function: bound Web3 ContractFunction (e.g. ``token.functions.approve(...)``)
            description: label used in logs and errors
            gas: fixed gas limit; estimated by the node when None

        Raises:
            ContractError: the call reverts during estimation or the node rejects it
            TransactionTimeoutError: no receipt within ``receipt_timeout``
            TransactionFailedError: the transaction was mined with status 0
        """
        if not self._is_connected:
            await self.connect()

        tx_params: Dict[str, Any] = {
            "from": self.address,
            "nonce": self.w3.eth.get_transaction_count(self.address, "pending"),
        }
        if gas is not None:
            tx_params["gas"] = gas

        try:
            transaction = contract_function.build_transaction(tx_params)
            signed = self.w3.eth.account.sign_transaction(transaction, self._private_key)
            tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except ContractLogicError as e:
            raise ContractError(f"{description} reverted: {e}", code="reverted")
        except Web3Exception as e:
            raise ContractError(f"{description} was rejected: {e}", code="rejected")

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"{description} sent: {tx_hash_hex}", extra={"tx_hash": tx_hash_hex})

        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash,
                timeout=self.receipt_timeout
            )
        except TimeExhausted:
            raise TransactionTimeoutError(
                f"{description} {tx_hash_hex} not mined within {self.receipt_timeout}s",
                code="timeout"
            )

        result = TransactionResult(
            tx_hash=tx_hash_hex,
            block_number=receipt["blockNumber"],
            gas_used=receipt["gasUsed"],
            status=receipt["status"],
            explorer_url=self.tx_url(tx_hash_hex),
            receipt=receipt
        )

        if result.status != 1:
            raise TransactionFailedError(
                f"{description} failed on-chain: {result.explorer_url}",
                code="failed"
            )

        logger.debug(f"{description} confirmed in block {result.block_number}")
        return result
