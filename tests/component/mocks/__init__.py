"""
Component Test Mocks

Shared mock implementations for testing.
These mocks replace real I/O dependencies (code files).
"""

from .source_mock import MockCodeSource

__all__ = [
    'MockCodeSource',
]
