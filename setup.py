# SPDX-FileCopyrightText: 2025 threshold-vss contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="threshold-vss",
    version="0.1.0",
    description="Shamir threshold secret sharing with Feldman verifiable shares",
    author="threshold-vss contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
        "dev": [
            # линтеры и форматтеры
            "ruff>=0.2.0",
            "black>=23.1.0",
            "isort>=5.10.1",
            "mypy>=1.8.0",
            # безопасность
            "bandit>=1.7.0",
            "reuse>=2.1.0",
            "pre-commit>=2.20.0",
        ],
    },
)
