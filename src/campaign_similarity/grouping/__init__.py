"""
Grouping module.

Partitions a campaign collection into clusters of mutually similar campaigns.
"""

from .clustering import (
    clamp_threshold,
    complete_linkage,
    connected_components,
    group_for_campaign,
    group_members,
    group_similar_campaigns,
)

__all__ = [
    "clamp_threshold",
    "complete_linkage",
    "connected_components",
    "group_for_campaign",
    "group_members",
    "group_similar_campaigns",
]
