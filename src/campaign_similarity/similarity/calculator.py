"""
Similarity calculator for campaign comparison.

Combines the pairwise metrics (target, deadline and either lexical category
overlap or funding progress) into one weighted composite score, then ranks
campaigns against a focal campaign or builds the full pairwise matrix used
for grouping.

All calls are pure: the calculator only holds its immutable configuration.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from ..core.models import (
    Campaign,
    MetricWeights,
    ScoredCampaign,
    SimilarityDetails,
    SimilarityScore,
    SimilarityScores,
)
from ..core.types import (
    DEFAULT_DEADLINE_WINDOW_SECONDS,
    DEFAULT_SIMILARITY_LIMIT,
    SECONDS_PER_DAY,
    ThirdAxis,
)
from .metrics import (
    category_similarity,
    deadline_similarity,
    progress_similarity,
    target_similarity,
)

logger = logging.getLogger(__name__)


def get_similarity_label(score: float) -> str:
    """Convert similarity score to human-readable label."""
    if score >= 0.95:
        return "Nearly Identical"
    elif score >= 0.90:
        return "Very Similar"
    elif score >= 0.85:
        return "Similar"
    elif score >= 0.80:
        return "Somewhat Similar"
    elif score >= 0.70:
        return "Moderately Similar"
    else:
        return "Different"


def _as_list(campaigns: Optional[Iterable[Campaign]]) -> list[Campaign]:
    if campaigns is None:
        raise ValueError("campaigns must be a collection of Campaign records, got None")
    return list(campaigns)


class SimilarityCalculator:
    """
    Computes campaign similarity from target, deadline and a third axis.

    The default configuration weights target 0.4, deadline 0.3 and lexical
    category overlap 0.3. Passing ``third_axis=ThirdAxis.progress`` swaps the
    lexical metric for funding-progress similarity; pair it with
    ``MetricWeights.equal()`` for the equal-thirds weighting.
    """

    def __init__(
        self,
        weights: MetricWeights | None = None,
        third_axis: ThirdAxis | str = ThirdAxis.category,
        deadline_window_seconds: float = DEFAULT_DEADLINE_WINDOW_SECONDS,
    ):
        """
        Initialize the calculator.

        Args:
            weights: Composite weights (defaults to 0.4/0.3/0.3)
            third_axis: 'category' (word overlap) or 'progress' (funding ratio)
            deadline_window_seconds: Deadline gap at which similarity reaches 0
        """
        self.weights = weights or MetricWeights()
        self.third_axis = ThirdAxis(third_axis)
        self.deadline_window_seconds = deadline_window_seconds

    # =========================================================================
    # Pair Scoring
    # =========================================================================

    def compute_details(self, campaign1: Campaign, campaign2: Campaign) -> SimilarityDetails:
        """Per-metric similarity values for one ordered pair."""
        target = target_similarity(campaign1, campaign2)
        deadline = deadline_similarity(campaign1, campaign2, self.deadline_window_seconds)

        if self.third_axis is ThirdAxis.progress:
            return SimilarityDetails(
                target=target,
                deadline=deadline,
                progress=progress_similarity(campaign1, campaign2),
            )

        return SimilarityDetails(
            target=target,
            deadline=deadline,
            category=category_similarity(campaign1, campaign2),
        )

    def third_axis_value(self, details: SimilarityDetails) -> float:
        if self.third_axis is ThirdAxis.progress:
            return details.progress or 0.0
        return details.category or 0.0

    def composite(self, details: SimilarityDetails) -> float:
        """Weighted sum of the per-metric values, clamped to [0, 1]."""
        score = (
            details.target * self.weights.target
            + details.deadline * self.weights.deadline
            + self.third_axis_value(details) * self.weights.third_axis
        )
        return max(0.0, min(1.0, score))

    def score_pair(self, campaign1: Campaign, campaign2: Campaign) -> SimilarityScore:
        """Composite score and breakdown of campaign2 relative to campaign1."""
        details = self.compute_details(campaign1, campaign2)
        return SimilarityScore(score=self.composite(details), details=details)

    # =========================================================================
    # Ranking
    # =========================================================================

    def calculate_similarity_scores(
        self,
        campaign: Campaign,
        all_campaigns: Iterable[Campaign],
    ) -> SimilarityScores:
        """
        Score one campaign against every other campaign of a collection.

        Args:
            campaign: Focal campaign
            all_campaigns: Collection to compare against (the focal id is skipped)

        Returns:
            SimilarityScores with a score per campaign id and the ids ordered
            by descending score (ties keep collection order)
        """
        campaigns = _as_list(all_campaigns)

        scores: dict[int, SimilarityScore] = {}
        for other in campaigns:
            if other.id == campaign.id:
                continue
            scores[other.id] = self.score_pair(campaign, other)

        top_similar = sorted(scores, key=lambda cid: scores[cid].score, reverse=True)

        return SimilarityScores(
            campaign_id=campaign.id,
            scores=scores,
            top_similar=top_similar,
        )

    def find_similar_campaigns(
        self,
        campaigns: Iterable[Campaign],
        focal_campaign: Campaign,
        limit: int = DEFAULT_SIMILARITY_LIMIT,
    ) -> list[ScoredCampaign]:
        """
        Rank the campaigns most similar to a focal campaign.

        Args:
            campaigns: Full campaign collection
            focal_campaign: Campaign to compare against; expected to be in
                the collection
            limit: Maximum number of results (<= 0 returns nothing)

        Returns:
            Up to ``limit`` ScoredCampaign entries, best first. Empty when the
            focal campaign is not part of the collection.

        Raises:
            ValueError: If campaigns is None
        """
        campaigns = _as_list(campaigns)

        if limit <= 0 or len(campaigns) < 2:
            return []

        if not any(c.id == focal_campaign.id for c in campaigns):
            logger.warning(
                "Focal campaign %d not found among %d campaigns",
                focal_campaign.id,
                len(campaigns),
            )
            return []

        ranked: list[ScoredCampaign] = []
        for other in campaigns:
            if other.id == focal_campaign.id:
                continue
            pair = self.score_pair(focal_campaign, other)
            ranked.append(
                ScoredCampaign(
                    campaign=other,
                    score=pair.score,
                    details=pair.details,
                    label=get_similarity_label(pair.score),
                )
            )

        # Stable sort keeps collection order for equal scores
        ranked.sort(key=lambda entry: entry.score, reverse=True)

        logger.debug(
            "Ranked %d candidates for campaign %d (limit=%d)",
            len(ranked),
            focal_campaign.id,
            limit,
        )

        return ranked[:limit]

    # =========================================================================
    # Pairwise Matrix
    # =========================================================================

    def compute_similarity_matrix(self, campaigns: Sequence[Campaign]) -> np.ndarray:
        """
        Composite scores for every pair of a collection.

        Each unordered pair is scored once, with the earlier campaign first,
        and mirrored. The diagonal is 1.0 and never read by callers since a
        campaign is not compared with itself.

        Returns:
            Symmetric (n, n) float64 matrix in collection order
        """
        n = len(campaigns)
        matrix = np.eye(n, dtype=np.float64)

        for i in range(n):
            for j in range(i + 1, n):
                score = self.score_pair(campaigns[i], campaigns[j]).score
                matrix[i, j] = score
                matrix[j, i] = score

        return matrix

    # =========================================================================
    # Explanation
    # =========================================================================

    def explain_similarity(self, campaign1: Campaign, campaign2: Campaign) -> str:
        """
        Human-readable breakdown of how two campaigns compare.

        Returns:
            Multi-line text listing each metric, its weight and the composite
        """
        pair = self.score_pair(campaign1, campaign2)
        details = pair.details
        window_days = self.deadline_window_seconds / SECONDS_PER_DAY

        axis_name = "Progress" if self.third_axis is ThirdAxis.progress else "Category"
        lines = [
            f'"{campaign1.title}" vs "{campaign2.title}"',
            f"  Target:   {details.target:6.1%}  (weight {self.weights.target:.2f}; "
            f"{campaign1.target} vs {campaign2.target})",
            f"  Deadline: {details.deadline:6.1%}  (weight {self.weights.deadline:.2f}; "
            f"{abs(campaign1.deadline - campaign2.deadline) / SECONDS_PER_DAY:.1f} days apart, "
            f"window {window_days:g} days)",
            f"  {axis_name + ':':<9} {self.third_axis_value(details):6.1%}  "
            f"(weight {self.weights.third_axis:.2f})",
            f"  Overall:  {pair.score:6.1%}  ({get_similarity_label(pair.score)})",
        ]
        return "\n".join(lines)
