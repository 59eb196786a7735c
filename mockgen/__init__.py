"""
Mock Data Generator
===================

Schema-aware synthetic data for live databases.
"""

from .pipeline import (
    generate_mock_data,
    execute_mock_data_generation,
    MockDataResult,
)

__all__ = [
    "generate_mock_data",
    "execute_mock_data_generation",
    "MockDataResult",
]
