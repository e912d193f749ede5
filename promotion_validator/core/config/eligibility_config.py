#!/usr/bin/env python3
"""Eligibility source configuration

Locations of the campaign and membership code files.
"""
import os
from dataclasses import dataclass, field

from .logging_config import LoggingConfig


@dataclass
class EligibilityConfig:
    """Code source settings"""
    campaign_codes_file: str = "data/campaign_codes.txt"
    membership_codes_file: str = "data/membership_codes.txt"
    codes_file_encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> 'EligibilityConfig':
        return cls(
            campaign_codes_file=os.getenv("CAMPAIGN_CODES_FILE", "data/campaign_codes.txt"),
            membership_codes_file=os.getenv("MEMBERSHIP_CODES_FILE", "data/membership_codes.txt"),
            codes_file_encoding=os.getenv("CODES_FILE_ENCODING", "utf-8"),
        )


@dataclass
class PromotionConfig:
    """Main configuration combining all sub-configs"""
    environment: str = "development"
    debug: bool = False
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    eligibility: EligibilityConfig = field(default_factory=EligibilityConfig)

    @classmethod
    def from_env(cls) -> 'PromotionConfig':
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            logging=LoggingConfig.from_env(),
            eligibility=EligibilityConfig.from_env(),
        )
