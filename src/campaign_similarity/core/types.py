"""
Core types and constants for Campaign Similarity.

This module provides:
- ThirdAxis and GroupingStrategy enums selecting the scoring/grouping variant
- CampaignStatus for the lifecycle state shown next to each campaign
- TargetRange buckets used to section campaigns by funding goal
- Default constants shared by the engine, settings and outer surfaces
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ThirdAxis(str, Enum):
    """Metric used alongside target and deadline in the composite score."""

    category = "category"  # title/description word overlap
    progress = "progress"  # amountCollected / target ratio


class GroupingStrategy(str, Enum):
    """Clustering algorithm used to partition a campaign collection."""

    complete_linkage = "complete_linkage"
    connected_components = "connected_components"


class CampaignStatus(str, Enum):
    """Lifecycle status of a campaign, in precedence order."""

    COMPLETED = "Campaign Completed"
    DEADLINE_PASSED = "Deadline Passed"
    TARGET_REACHED = "Target Reached"
    ACTIVE = "Donate"


# =============================================================================
# Defaults
# =============================================================================

SECONDS_PER_DAY = 24 * 60 * 60

DEFAULT_DEADLINE_WINDOW_DAYS = 30
DEFAULT_DEADLINE_WINDOW_SECONDS = DEFAULT_DEADLINE_WINDOW_DAYS * SECONDS_PER_DAY

DEFAULT_SIMILARITY_THRESHOLD = 0.7
DEFAULT_SIMILARITY_LIMIT = 3

DEFAULT_TARGET_WEIGHT = 0.4
DEFAULT_DEADLINE_WEIGHT = 0.3
DEFAULT_THIRD_AXIS_WEIGHT = 0.3

WEIGHT_SUM_TOLERANCE = 1e-6


# =============================================================================
# TARGET RANGES - sections used to list campaigns by funding goal
# =============================================================================


@dataclass(frozen=True)
class TargetRange:
    """
    A half-open funding-goal bucket (lower, upper].

    The first bucket also includes its lower bound so that zero and
    sub-unit targets land somewhere.
    """

    label: str
    lower: float
    upper: Optional[float] = None

    def contains(self, target: float) -> bool:
        if target <= self.lower and self.lower > 0:
            return False
        if self.upper is None:
            return target > self.lower
        return target <= self.upper


TARGET_RANGES: tuple[TargetRange, ...] = (
    TargetRange(label="0-1", lower=0.0, upper=1.0),
    TargetRange(label="1-5", lower=1.0, upper=5.0),
    TargetRange(label="5-10", lower=5.0, upper=10.0),
    TargetRange(label="10+", lower=10.0),
)


def get_target_range(target: float) -> TargetRange:
    """
    Get the section a funding goal belongs to.

    Targets at or below the first bucket's upper bound (including zero and
    negative values) fall into the first bucket.
    """
    for target_range in TARGET_RANGES:
        if target_range.contains(target):
            return target_range
    return TARGET_RANGES[0]
