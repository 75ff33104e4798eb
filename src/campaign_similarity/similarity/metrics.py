"""
Pairwise similarity metrics between two campaigns.

Each metric returns a value in [0, 1] where 1 means identical and 0 means
maximally dissimilar within the metric's normalization window. Degenerate
inputs (zero targets, empty text) map to a defined value instead of
dividing by zero.
"""

from __future__ import annotations

import math

from ..core.models import Campaign
from ..core.types import DEFAULT_DEADLINE_WINDOW_SECONDS


def _clamp(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def tokenize(campaign: Campaign) -> list[str]:
    """Lowercased whitespace-split words of title and description."""
    return f"{campaign.title} {campaign.description}".lower().split()


def target_similarity(campaign1: Campaign, campaign2: Campaign) -> float:
    """
    Compare funding goals: 1 - |t1 - t2| / max(t1, t2).

    Two zero targets are identical (1.0). A non-positive maximum cannot
    normalize the difference, so equal values score 1.0 and others 0.0.
    """
    target1 = campaign1.target_value
    target2 = campaign2.target_value
    max_target = max(target1, target2)

    if max_target <= 0:
        return 1.0 if target1 == target2 else 0.0

    return _clamp(1 - abs(target1 - target2) / max_target)


def deadline_similarity(
    campaign1: Campaign,
    campaign2: Campaign,
    window_seconds: float = DEFAULT_DEADLINE_WINDOW_SECONDS,
) -> float:
    """
    Compare deadlines: 1 - min(|d1 - d2| / window, 1).

    Gaps of a full window (30 days by default) or more score 0.
    """
    if window_seconds <= 0:
        return 1.0 if campaign1.deadline == campaign2.deadline else 0.0

    difference = abs(campaign1.deadline - campaign2.deadline)
    return _clamp(1 - min(difference / window_seconds, 1.0))


def category_similarity(campaign1: Campaign, campaign2: Campaign) -> float:
    """
    Lexical overlap of title + description.

    Counts every word of the first campaign (repeats included) that appears
    anywhere in the second, divided by the longer word list. Two empty texts
    are identical (1.0).

    With repeated words the count can differ by direction, e.g. "aid aid"
    against "aid relief" gives 1.0 one way and 0.5 the other.
    """
    words1 = tokenize(campaign1)
    words2 = tokenize(campaign2)
    longest = max(len(words1), len(words2))

    if longest == 0:
        return 1.0

    vocabulary2 = set(words2)
    common = sum(1 for word in words1 if word in vocabulary2)
    return _clamp(common / longest)


def progress_ratio(campaign: Campaign) -> float:
    """
    Funding progress amountCollected / target.

    A zero or negative target has nothing left to raise, so its ratio is 1.0.
    The ratio can exceed 1 when a campaign overshoots its goal.
    """
    target = campaign.target_value
    if target <= 0:
        return 1.0
    return campaign.collected_value / target


def progress_similarity(campaign1: Campaign, campaign2: Campaign) -> float:
    """Compare funding progress: 1 - |p1 - p2|, clamped to [0, 1]."""
    return _clamp(1 - abs(progress_ratio(campaign1) - progress_ratio(campaign2)))
