"""
Eligibility Service Factory

Factory for creating EligibilityService with real dependencies.
This is the ONLY module that imports concrete implementations.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..core.config import EligibilityConfig, get_settings

from .code_repository import FileCodeRepository
from .eligibility_service import EligibilityService

logger = logging.getLogger(__name__)


def create_eligibility_service(
    campaign_file: Optional[Union[str, Path]] = None,
    membership_file: Optional[Union[str, Path]] = None,
    config: Optional[EligibilityConfig] = None,
) -> EligibilityService:
    """
    Create EligibilityService backed by code files

    Args:
        campaign_file: Campaign codes file (config value if not provided)
        membership_file: Membership codes file (config value if not provided)
        config: Optional eligibility config (global settings if not provided)

    Returns:
        EligibilityService whose campaign index loads on first query
    """
    if config is None:
        config = get_settings().eligibility

    campaign_repo = FileCodeRepository(
        campaign_file or config.campaign_codes_file,
        encoding=config.codes_file_encoding,
    )
    membership_repo = FileCodeRepository(
        membership_file or config.membership_codes_file,
        encoding=config.codes_file_encoding,
    )

    logger.info(
        f"EligibilityService created with campaign={campaign_repo.name} "
        f"membership={membership_repo.name}"
    )

    return EligibilityService(
        campaign_source=campaign_repo,
        membership_source=membership_repo,
    )


__all__ = ["create_eligibility_service"]
