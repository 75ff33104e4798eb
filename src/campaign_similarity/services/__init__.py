"""
Services module for Campaign Similarity.

This module provides business logic services:
- similarity: Ranked similar campaigns, similarity groups and explanations
- campaigns: Status, progress, target-range sections and collection totals

Usage:
    from campaign_similarity.services import get_similarity_service
    from campaign_similarity.services.campaigns import summarize_campaign
"""

from .campaigns import (
    get_campaign_status,
    get_collection_stats,
    get_progress_percent,
    get_time_left,
    group_by_target_range,
    is_campaign_active,
    summarize_campaign,
)
from .similarity import SimilarityService, get_similarity_service

__all__ = [
    # Campaigns
    "get_campaign_status",
    "get_collection_stats",
    "get_progress_percent",
    "get_time_left",
    "group_by_target_range",
    "is_campaign_active",
    "summarize_campaign",
    # Similarity
    "SimilarityService",
    "get_similarity_service",
]
