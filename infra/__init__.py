"""
Infrastructure module exports.

Configuration and corrector selection.
"""

from .config import InfraConfig, get_config

__all__ = [
    "InfraConfig",
    "get_config",
]
