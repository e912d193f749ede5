"""
promotion_validator

Checks promotion codes against a campaign code source and a membership
code source.
"""

__version__ = "0.1.0"
