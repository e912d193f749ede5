"""
Promotion eligibility command line entry point

Usage:
    promo-eligibility <code> [campaign_file membership_file] [--log-level LEVEL]

Prints true or false to stdout and exits 0. Any validation or source error
is printed to stderr and exits 1.
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from ..core.config import get_settings
from ..core.logger import setup_service_logger

from .factory import create_eligibility_service
from .models import EligibilityResult

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promo-eligibility",
        description="Check whether a promotion code is in both the campaign and membership code files",
    )
    parser.add_argument("code", help="Promotion code (1-5 lowercase letters)")
    parser.add_argument(
        "campaign_file",
        nargs="?",
        help="Campaign codes file (default: CAMPAIGN_CODES_FILE)",
    )
    parser.add_argument(
        "membership_file",
        nargs="?",
        help="Membership codes file (default: MEMBERSHIP_CODES_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Log level for stderr diagnostics (default: WARNING)",
    )
    return parser


async def check_code(
    code: str,
    campaign_file: Optional[str] = None,
    membership_file: Optional[str] = None,
) -> EligibilityResult:
    service = create_eligibility_service(
        campaign_file=campaign_file,
        membership_file=membership_file,
        config=get_settings().eligibility,
    )
    return await service.is_eligible(code)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_service_logger("eligibility_service", level=args.log_level)

    result = asyncio.run(
        check_code(args.code, args.campaign_file, args.membership_file)
    )
    logger.debug(f"Result for {args.code!r}: eligible={result.eligible} error={result.error}")

    if result.error is not None:
        print(f"error: {result.error}", file=sys.stderr)
        return 1

    print("true" if result.eligible else "false")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
