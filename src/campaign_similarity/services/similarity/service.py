"""
Similarity Service implementation.

Provides a clean interface over the SimilarityCalculator and the grouping
strategies, configured from application settings.
"""

import logging
from typing import Iterable, Optional

from ...core.config import Settings, get_settings
from ...core.models import (
    Campaign,
    GroupingResult,
    MetricWeights,
    ScoredCampaign,
    SimilarityScore,
)
from ...core.types import GroupingStrategy, ThirdAxis
from ...grouping import group_similar_campaigns
from ...similarity import SimilarityCalculator

logger = logging.getLogger(__name__)


class SimilarityService:
    """
    Campaign similarity service.

    Features:
    - Ranked "similar campaigns" for a focal campaign
    - Similarity groups plus the ungrouped complement
    - Pairwise scores and readable explanations

    Holds only configuration; every call works on the collection it is given.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize similarity service.

        Args:
            settings: Application settings (defaults to get_settings())
        """
        self._settings = settings or get_settings()
        self._calculator = self.build_calculator()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def calculator(self) -> SimilarityCalculator:
        return self._calculator

    def build_calculator(
        self,
        weights: MetricWeights | None = None,
        third_axis: ThirdAxis | str | None = None,
    ) -> SimilarityCalculator:
        """Calculator from settings, with optional per-call overrides."""
        return SimilarityCalculator(
            weights=weights or self._settings.metric_weights,
            third_axis=third_axis or self._settings.third_axis,
            deadline_window_seconds=self._settings.deadline_window_seconds,
        )

    def _calculator_for(
        self,
        weights: MetricWeights | None,
        third_axis: ThirdAxis | str | None,
    ) -> SimilarityCalculator:
        if weights is None and third_axis is None:
            return self._calculator
        return self.build_calculator(weights=weights, third_axis=third_axis)

    def find_similar(
        self,
        campaigns: Iterable[Campaign],
        campaign_id: int,
        limit: int | None = None,
        weights: MetricWeights | None = None,
        third_axis: ThirdAxis | str | None = None,
    ) -> list[ScoredCampaign]:
        """
        Rank campaigns similar to the campaign with ``campaign_id``.

        Unknown ids yield an empty list rather than an error.
        """
        if campaigns is None:
            raise ValueError("campaigns must be a collection of Campaign records, got None")

        campaigns = list(campaigns)
        focal = next((c for c in campaigns if c.id == campaign_id), None)
        if focal is None:
            logger.warning("Campaign %d not found; returning no similar campaigns", campaign_id)
            return []

        calculator = self._calculator_for(weights, third_axis)

        return calculator.find_similar_campaigns(
            campaigns,
            focal,
            limit=self._settings.similarity_limit if limit is None else limit,
        )

    def group(
        self,
        campaigns: Iterable[Campaign],
        threshold: float | None = None,
        strategy: GroupingStrategy | str | None = None,
        weights: MetricWeights | None = None,
        third_axis: ThirdAxis | str | None = None,
    ) -> GroupingResult:
        """
        Partition campaigns into similarity groups.

        Per-call weights and third axis score the pairs the same way
        find_similar does with them.
        """
        calculator = self._calculator_for(weights, third_axis)

        return group_similar_campaigns(
            campaigns,
            threshold=self._settings.similarity_threshold if threshold is None else threshold,
            calculator=calculator,
            strategy=strategy or self._settings.grouping_strategy,
        )

    def compare(
        self,
        campaigns: Iterable[Campaign],
        campaign_id: int,
        other_id: int,
    ) -> Optional[tuple[SimilarityScore, str]]:
        """
        Score and explain one pair of campaigns.

        Returns:
            (score, explanation) or None if either id is missing
        """
        lookup = {c.id: c for c in campaigns}
        first = lookup.get(campaign_id)
        second = lookup.get(other_id)
        if first is None or second is None:
            return None

        return (
            self._calculator.score_pair(first, second),
            self._calculator.explain_similarity(first, second),
        )

    def get_status(self) -> dict:
        """Get service status."""
        weights = self._settings.metric_weights
        return {
            "service": "similarity",
            "calculator": "SimilarityCalculator",
            "methodology": {
                "metrics": ["target", "deadline", self._settings.third_axis.value],
                "weights": {
                    "target": weights.target,
                    "deadline": weights.deadline,
                    self._settings.third_axis.value: weights.third_axis,
                },
                "deadline_window_days": self._settings.deadline_window_days,
                "grouping": self._settings.grouping_strategy.value,
                "threshold": self._settings.similarity_threshold,
                "default_limit": self._settings.similarity_limit,
            },
        }


def get_similarity_service(settings: Settings | None = None) -> SimilarityService:
    """
    Get a similarity service.

    Args:
        settings: Application settings (defaults to the cached get_settings())

    Returns:
        SimilarityService instance
    """
    return SimilarityService(settings)
