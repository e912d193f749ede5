"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (real code files in tmp_path, CLI)
    - unit/       : Unit tests (pure logic, in-memory sources)
"""
import os
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Code File Fixtures
# =============================================================================

@pytest.fixture
def write_codes(tmp_path: Path) -> Callable[..., Path]:
    """Write codes to a file under tmp_path, one per line"""

    def _write(name: str, codes: Iterable[str], line_ending: str = "\n") -> Path:
        path = tmp_path / name
        content = "".join(f"{code}{line_ending}" for code in codes)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
