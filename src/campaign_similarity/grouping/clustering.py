"""
Campaign grouping by composite similarity.

Two strategies partition a collection:

- complete_linkage (default): one greedy pass in input order. A campaign
  seeds a group, and every later unassigned campaign joins it only if its
  score against *every* current member meets the threshold. Assignments are
  final, so a different input order can produce different groups.
- connected_components: union-find over the graph of pairs meeting the
  threshold. Membership does not depend on input order, but a group only
  needs a chain of similar pairs, not all-pairs similarity.

Singleton groups are dropped and reported as ``other``. Nothing is cached
between calls; the returned GroupingResult is owned by the caller.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np

from ..core.models import Campaign, CampaignGroup, GroupingResult
from ..core.types import (
    DEFAULT_SIMILARITY_LIMIT,
    DEFAULT_SIMILARITY_THRESHOLD,
    GroupingStrategy,
)
from ..similarity.calculator import SimilarityCalculator

logger = logging.getLogger(__name__)


def clamp_threshold(threshold: float) -> float:
    """Clamp a grouping threshold into [0, 1]."""
    return max(0.0, min(1.0, float(threshold)))


# =============================================================================
# Membership Algorithms (operate on indices into the collection)
# =============================================================================


def complete_linkage(matrix: np.ndarray, threshold: float) -> list[list[int]]:
    """
    Greedy complete-linkage clusters over a pairwise score matrix.

    Returns:
        Clusters (including singletons) as index lists, in seed order
    """
    n = matrix.shape[0]
    assigned = np.zeros(n, dtype=bool)
    clusters: list[list[int]] = []

    for seed in range(n):
        if assigned[seed]:
            continue

        members = [seed]
        assigned[seed] = True

        for candidate in range(n):
            if assigned[candidate]:
                continue
            if bool(np.all(matrix[members, candidate] >= threshold)):
                members.append(candidate)
                assigned[candidate] = True

        clusters.append(members)

    return clusters


def connected_components(matrix: np.ndarray, threshold: float) -> list[list[int]]:
    """
    Connected components of the thresholded similarity graph (union-find).

    Returns:
        Components (including singletons) as sorted index lists, ordered by
        their first member
    """
    n = matrix.shape[0]
    parent = list(range(n))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    adjacency = matrix >= threshold
    for i in range(n):
        for j in range(i + 1, n):
            if adjacency[i, j]:
                root_i, root_j = find(i), find(j)
                if root_i != root_j:
                    parent[max(root_i, root_j)] = min(root_i, root_j)

    components: dict[int, list[int]] = {}
    for i in range(n):
        components.setdefault(find(i), []).append(i)

    return sorted(components.values(), key=lambda members: members[0])


_STRATEGIES = {
    GroupingStrategy.complete_linkage: complete_linkage,
    GroupingStrategy.connected_components: connected_components,
}


# =============================================================================
# Public Grouping API
# =============================================================================


def _build_group(number: int, members: list[Campaign]) -> CampaignGroup:
    first_words = members[0].title.split()
    name = f"{first_words[0]} Group" if first_words else f"Group {number}"

    return CampaignGroup(
        id=f"group-{number}",
        name=name,
        campaigns=members,
        average_target=sum(c.target_value for c in members) / len(members),
        average_deadline=sum(c.deadline for c in members) / len(members),
    )


def group_similar_campaigns(
    campaigns: Iterable[Campaign],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    calculator: SimilarityCalculator | None = None,
    strategy: GroupingStrategy | str = GroupingStrategy.complete_linkage,
) -> GroupingResult:
    """
    Partition campaigns into similarity groups.

    Args:
        campaigns: Campaign collection, in the order that drives assignment
        threshold: Minimum composite score for co-membership (clamped to [0, 1])
        calculator: Scoring configuration (defaults to SimilarityCalculator())
        strategy: 'complete_linkage' or 'connected_components'

    Returns:
        GroupingResult with groups of two or more campaigns and the
        remaining campaigns as ``other`` (input order)

    Raises:
        ValueError: If campaigns is None
    """
    if campaigns is None:
        raise ValueError("campaigns must be a collection of Campaign records, got None")

    campaigns = list(campaigns)
    calculator = calculator or SimilarityCalculator()
    strategy = GroupingStrategy(strategy)
    threshold = clamp_threshold(threshold)

    if not campaigns:
        return GroupingResult(groups=[], other=[], threshold=threshold, strategy=strategy.value)

    matrix = calculator.compute_similarity_matrix(campaigns)
    clusters = _STRATEGIES[strategy](matrix, threshold)

    groups: list[CampaignGroup] = []
    grouped: set[int] = set()
    for members in clusters:
        if len(members) < 2:
            continue
        groups.append(_build_group(len(groups) + 1, [campaigns[i] for i in members]))
        grouped.update(members)

    other = [c for i, c in enumerate(campaigns) if i not in grouped]

    logger.info(
        "Grouped %d campaigns into %d groups (%d ungrouped, threshold=%.2f, strategy=%s)",
        len(campaigns),
        len(groups),
        len(other),
        threshold,
        strategy.value,
    )

    return GroupingResult(
        groups=groups,
        other=other,
        threshold=threshold,
        strategy=strategy.value,
    )


def group_for_campaign(result: GroupingResult, campaign_id: int) -> Optional[CampaignGroup]:
    """Group containing a campaign, or None if it is ungrouped."""
    for group in result.groups:
        if campaign_id in group.campaign_ids():
            return group
    return None


def group_members(
    result: GroupingResult,
    campaign_id: int,
    limit: int = DEFAULT_SIMILARITY_LIMIT,
) -> list[Campaign]:
    """Other members of a campaign's group, in group order."""
    group = group_for_campaign(result, campaign_id)
    if group is None or limit <= 0:
        return []
    return [c for c in group.campaigns if c.id != campaign_id][:limit]
