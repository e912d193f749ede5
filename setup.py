#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup configuration for promotion-validator package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="promotion-validator",
    version="0.1.0",
    description="Promotion code eligibility checks across campaign and membership sources",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["promotion_validator", "promotion_validator.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "promo-eligibility=promotion_validator.eligibility_service.main:main",
        ],
    },
)
