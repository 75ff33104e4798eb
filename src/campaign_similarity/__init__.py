"""
Campaign Similarity

Similarity scoring and grouping for decentralized crowdfunding campaigns.
The client hands over the campaign snapshot it read from the contract and
gets back ranked "similar campaigns", similarity groups and lifecycle
summaries. Every call is a pure transformation of the snapshot.

Key Features:
- Composite score over target, deadline and lexical overlap (or progress)
- Complete-linkage grouping with an order-independent alternative
- Campaign status, progress and target-range sections
- CLI and FastAPI surfaces over the same service

Usage:
    from campaign_similarity import Campaign, SimilarityCalculator, group_similar_campaigns

    calculator = SimilarityCalculator()
    similar = calculator.find_similar_campaigns(campaigns, campaigns[0], limit=3)
    result = group_similar_campaigns(campaigns, threshold=0.7)
"""

from .core.models import (
    Campaign,
    CampaignGroup,
    GroupingResult,
    MetricWeights,
    ScoredCampaign,
    SimilarityDetails,
    SimilarityScore,
)
from .core.types import GroupingStrategy, ThirdAxis
from .fixtures import load_campaigns, parse_campaigns
from .grouping import group_for_campaign, group_members, group_similar_campaigns
from .similarity import SimilarityCalculator
from .services.similarity import SimilarityService, get_similarity_service

__all__ = [
    # Models
    "Campaign",
    "CampaignGroup",
    "GroupingResult",
    "MetricWeights",
    "ScoredCampaign",
    "SimilarityDetails",
    "SimilarityScore",
    # Types
    "GroupingStrategy",
    "ThirdAxis",
    # Loading
    "load_campaigns",
    "parse_campaigns",
    # Engine
    "SimilarityCalculator",
    "group_similar_campaigns",
    "group_for_campaign",
    "group_members",
    # Service
    "SimilarityService",
    "get_similarity_service",
]
