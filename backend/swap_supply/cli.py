"""
Command line entry point
"""
import argparse
import asyncio
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from swap_supply.config.logging_config import setup_logging
from swap_supply.config.settings import settings
from swap_supply.workers.swap_and_supply import execute

logger = logging.getLogger(__name__)


def _decimal(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    if not amount.is_finite() or amount <= 0:
        raise argparse.ArgumentTypeError(f"amount must be positive: {value!r}")
    return amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swap-supply",
        description="Swap USDC for LINK on Uniswap V3, then supply the LINK to Aave."
    )
    parser.add_argument(
        "--amount",
        type=_decimal,
        default=None,
        help=f"USDC amount to swap (default: SWAP_AMOUNT={settings.SWAP_AMOUNT})"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="override LOG_LEVEL"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="override LOG_FORMAT"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level=args.log_level, log_format=args.log_format)
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} on {settings.CHAIN.value}")

    return asyncio.run(execute(settings, amount=args.amount))


if __name__ == "__main__":
    sys.exit(main())
