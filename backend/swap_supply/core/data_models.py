"""
Data models for the swap-and-supply executor
Uses Pydantic for validation and serialization
"""
from pydantic import BaseModel, Field, validator
from typing import Optional, Dict, Any
from enum import Enum
from web3 import Web3


class Chain(str, Enum):
    """Blockchain enumeration"""
    ETHEREUM = "ethereum"
    SEPOLIA = "sepolia"
    POLYGON = "polygon"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"
    BSC = "bsc"


def _checksum(v: str) -> str:
    if not Web3.is_address(v):
        raise ValueError(f'Invalid address: {v}')
    return Web3.to_checksum_address(v)


class ExactInputSingleParams(BaseModel):
    """Uniswap V3 router exactInputSingle parameters"""
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    fee: int
    recipient: str
    amount_in: int = Field(alias="amountIn")
    amount_out_minimum: int = Field(default=0, alias="amountOutMinimum", ge=0)
    sqrt_price_limit_x96: int = Field(default=0, alias="sqrtPriceLimitX96", ge=0)

    @validator('token_in', 'token_out', 'recipient')
    def validate_address(cls, v):
        return _checksum(v)

    @validator('amount_in')
    def validate_amount(cls, v):
        if v <= 0:
            raise ValueError('Amount must be positive')
        return v

    def to_contract_args(self) -> Dict[str, Any]:
        """Struct argument in the router's field naming"""
        return self.model_dump(by_alias=True)

    class Config:
        populate_by_name = True


class SupplyParams(BaseModel):
    """Lending pool deposit parameters"""
    asset: str
    amount: int
    on_behalf_of: str
    referral_code: int = Field(default=0, ge=0, le=65535)

    @validator('asset', 'on_behalf_of')
    def validate_address(cls, v):
        return _checksum(v)

    @validator('amount')
    def validate_amount(cls, v):
        if v <= 0:
            raise ValueError('Amount must be positive')
        return v

    def to_contract_args(self) -> tuple:
        return (self.asset, self.amount, self.on_behalf_of, self.referral_code)


class TransactionResult(BaseModel):
    """Confirmed transaction"""
    tx_hash: str
    block_number: int
    gas_used: int
    status: int
    explorer_url: str
    receipt: Optional[Any] = Field(default=None, exclude=True, repr=False)


class SwapResult(BaseModel):
    """Outcome of the approve + exactInputSingle pair"""
    approval: TransactionResult
    swap: TransactionResult
    token_in: str
    token_out: str
    amount_in: int
    amount_out: int


class SupplyResult(BaseModel):
    """Outcome of the approve + deposit pair"""
    approval: TransactionResult
    supply: TransactionResult
    asset: str
    amount: int


class ExecutionSummary(BaseModel):
    """Complete swap-and-supply run"""
    swap: SwapResult
    supply: SupplyResult
