#!/usr/bin/env python3
"""Configuration for promotion_validator

Configuration hierarchy:
- logging_config: Logging configuration
- eligibility_config: Campaign and membership code sources
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .eligibility_config import EligibilityConfig, PromotionConfig

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "environments/dev.env",
    "dev": "environments/dev.env",
    "testing": "environments/test.env",
    "test": "environments/test.env",
    "staging": "environments/staging.env",
    "production": "environments/production.env",
}
env_file = env_files.get(env, "environments/dev.env")
load_dotenv(env_file, override=False)

# Create global settings instance
settings = PromotionConfig.from_env()

def get_settings() -> PromotionConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> PromotionConfig:
    """Reload settings from environment"""
    global settings
    settings = PromotionConfig.from_env()
    return settings

__all__ = [
    'PromotionConfig',
    'get_settings',
    'reload_settings',
    'settings',
    'LoggingConfig',
    'EligibilityConfig',
]
