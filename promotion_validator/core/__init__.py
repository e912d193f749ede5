"""
Core Module for promotion_validator

Shared infrastructure used by the eligibility service.

COMPONENTS:
    - config/: Environment-driven configuration (dotenv + dataclasses)
    - logger.py: Service logger setup

USAGE:
    from promotion_validator.core.config import get_settings
    from promotion_validator.core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("eligibility_service", level=settings.logging.log_level)
"""

from .config import PromotionConfig, get_settings, reload_settings
from .logger import reset_service_logger, setup_service_logger

__all__ = [
    "PromotionConfig",
    "get_settings",
    "reload_settings",
    "setup_service_logger",
    "reset_service_logger",
]
