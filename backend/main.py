"""
Main application entry point
Swaps USDC for LINK on Uniswap, then supplies the LINK to Aave
"""
import sys

from swap_supply.cli import main


if __name__ == "__main__":
    sys.exit(main())
