"""
Configuration - re-exports from core.config.

New code should import directly from campaign_similarity.core.config.
"""

from .core.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
