"""
Unit Test Fixtures for Eligibility Service

Provides mock sources and a service wired to them.
"""

import pytest

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from tests.component.mocks import MockCodeSource
from promotion_validator.eligibility_service.eligibility_service import EligibilityService


CAMPAIGN_CODES = ["promo", "sale", "xyz"]
MEMBERSHIP_CODES = ["promo", "gold"]


@pytest.fixture
def campaign_source():
    """Campaign source: promo, sale, xyz"""
    return MockCodeSource(CAMPAIGN_CODES, name="campaign")


@pytest.fixture
def membership_source():
    """Membership source: promo, gold"""
    return MockCodeSource(MEMBERSHIP_CODES, name="membership")


@pytest.fixture
def eligibility_service(campaign_source, membership_source):
    """Eligibility service with mock sources"""
    return EligibilityService(
        campaign_source=campaign_source,
        membership_source=membership_source,
    )
