"""
Constants and static configuration for the swap-and-supply executor
"""
from swap_supply.core.data_models import Chain

# Contract addresses on Sepolia testnet must be filled in by the operator
PLACEHOLDER_PREFIX = "0xINSERT_"
PLACEHOLDER_USDC_ADDRESS = "0xINSERT_USDC_CONTRACT_ADDRESS"
PLACEHOLDER_LINK_ADDRESS = "0xINSERT_LINK_CONTRACT_ADDRESS"
PLACEHOLDER_UNISWAP_ROUTER_ADDRESS = "0xINSERT_UNISWAP_ROUTER_ADDRESS"
PLACEHOLDER_AAVE_LENDING_POOL_ADDRESS = "0xINSERT_AAVE_LENDING_POOL_ADDRESS"

# Standard Fee Tiers for Uniswap V3
UNISWAP_FEE_TIERS = [100, 500, 3000, 10000]  # 0.01%, 0.05%, 0.3%, 1%

# Lending pool entry points (V2 LendingPool.deposit, V3 Pool.supply)
AAVE_SUPPLY_FUNCTIONS = ["deposit", "supply"]

CHAIN_IDS = {
    Chain.ETHEREUM: 1,
    Chain.SEPOLIA: 11155111,
    Chain.POLYGON: 137,
    Chain.ARBITRUM: 42161,
    Chain.OPTIMISM: 10,
    Chain.BSC: 56,
}

EXPLORER_URLS = {
    Chain.ETHEREUM: "https://etherscan.io",
    Chain.SEPOLIA: "https://sepolia.etherscan.io",
    Chain.POLYGON: "https://polygonscan.com",
    Chain.ARBITRUM: "https://arbiscan.io",
    Chain.OPTIMISM: "https://optimistic.etherscan.io",
    Chain.BSC: "https://bscscan.com",
}

# Chains whose blocks carry oversized extraData
POA_CHAINS = {Chain.POLYGON, Chain.BSC}

# ABI files shipped in swap_supply/abis
ERC20_ABI = "erc20"
UNISWAP_ROUTER_ABI = "uniswap_router"
AAVE_LENDING_POOL_ABI = "aave_lending_pool"
