#!/usr/bin/env python3
"""
Generate campaign and membership code files for local testing

Usage:
    python scripts/generate_data.py --output-dir data --campaign-count 500000
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from promotion_validator.core.logger import setup_service_logger
from promotion_validator.eligibility_service.dataset import generate_dataset, write_dataset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate promotion code test data")
    parser.add_argument("--output-dir", default="data", help="Directory for the code files")
    parser.add_argument("--campaign-count", type=int, default=500_000, help="Number of unique campaign codes")
    parser.add_argument("--overlap-ratio", type=float, default=0.4, help="Probability a campaign code is also a membership code")
    parser.add_argument("--membership-ratio", type=float, default=0.6, help="Membership size relative to campaign size")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output")
    parser.add_argument("--log-level", default="INFO", help="Log level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_service_logger("generate_data", level=args.log_level)

    try:
        dataset = generate_dataset(
            campaign_count=args.campaign_count,
            overlap_ratio=args.overlap_ratio,
            membership_ratio=args.membership_ratio,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    campaign_path, membership_path = write_dataset(dataset, args.output_dir)

    print("Dataset generated")
    print(f"Campaign codes: {len(dataset.campaign_codes)} -> {campaign_path}")
    print(f"Membership codes: {len(dataset.membership_codes)} -> {membership_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
