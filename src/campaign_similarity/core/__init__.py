"""
Core module for Campaign Similarity.

This module provides the foundational components:
- Configuration management (config.py)
- Data models (models.py)
- Enums and shared constants (types.py)

Usage:
    from campaign_similarity.core import Settings, get_settings
    from campaign_similarity.core import Campaign, MetricWeights
    from campaign_similarity.core import ThirdAxis, GroupingStrategy
"""

# Configuration
from .config import Settings, get_settings

# Types
from .types import (
    CampaignStatus,
    GroupingStrategy,
    TargetRange,
    ThirdAxis,
    TARGET_RANGES,
    get_target_range,
)

# Models
from .models import (
    Campaign,
    CampaignGroup,
    CampaignSummary,
    CollectionStats,
    GroupingResult,
    MetricWeights,
    ScoredCampaign,
    SimilarityDetails,
    SimilarityScore,
    SimilarityScores,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "CampaignStatus",
    "GroupingStrategy",
    "TargetRange",
    "ThirdAxis",
    "TARGET_RANGES",
    "get_target_range",
    # Models
    "Campaign",
    "CampaignGroup",
    "CampaignSummary",
    "CollectionStats",
    "GroupingResult",
    "MetricWeights",
    "ScoredCampaign",
    "SimilarityDetails",
    "SimilarityScore",
    "SimilarityScores",
]
