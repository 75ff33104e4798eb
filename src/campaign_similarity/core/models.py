"""
Pydantic models for campaign records and similarity results.

These models are used for:
- Validating campaign snapshots handed over by the contract reader
- Type-safe engine results (scores, ranked campaigns, groups)
- API response serialization
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from .types import (
    DEFAULT_DEADLINE_WEIGHT,
    DEFAULT_TARGET_WEIGHT,
    DEFAULT_THIRD_AXIS_WEIGHT,
    WEIGHT_SUM_TOLERANCE,
    CampaignStatus,
)


# =============================================================================
# Campaign
# =============================================================================


class Campaign(BaseModel):
    """
    A crowdfunding campaign as read from the contract.

    Amounts stay exact decimal strings (on-chain values) and are only
    converted to floats when scored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int
    owner: str = ""
    title: str = ""
    description: str = ""
    target: str
    deadline: int
    amount_collected: str = Field(default="0", alias="amountCollected")
    image: Optional[str] = None
    claimed: bool = False

    @field_validator("target", "amount_collected", mode="before")
    @classmethod
    def _coerce_decimal_string(cls, value: Any) -> str:
        if isinstance(value, bool):
            raise ValueError("amount must be a decimal string, not a boolean")
        text = str(value).strip()
        try:
            parsed = Decimal(text)
        except InvalidOperation as e:
            raise ValueError(f"invalid decimal amount: {value!r}") from e
        if not parsed.is_finite() or not math.isfinite(float(parsed)):
            raise ValueError(f"amount must be finite and within float range: {value!r}")
        return text

    @property
    def target_value(self) -> float:
        """Funding goal as a float, for scoring only."""
        return float(Decimal(self.target))

    @property
    def collected_value(self) -> float:
        """Amount raised so far as a float, for scoring only."""
        return float(Decimal(self.amount_collected))


# =============================================================================
# Composite Weights
# =============================================================================


def check_weight_sum(target: float, deadline: float, third_axis: float) -> None:
    """Raise ValueError unless the three weights sum to 1."""
    total = target + deadline + third_axis
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise ValueError(
            f"metric weights must sum to 1, got {total:.6f} "
            f"(target={target}, deadline={deadline}, third_axis={third_axis})"
        )


class MetricWeights(BaseModel):
    """
    Weights of the composite similarity score.

    The default is target 0.4, deadline 0.3, third axis 0.3. Weights that do
    not sum to 1 are rejected rather than renormalized.
    """

    model_config = ConfigDict(frozen=True)

    target: float = Field(default=DEFAULT_TARGET_WEIGHT, ge=0)
    deadline: float = Field(default=DEFAULT_DEADLINE_WEIGHT, ge=0)
    third_axis: float = Field(default=DEFAULT_THIRD_AXIS_WEIGHT, ge=0)

    @model_validator(mode="after")
    def _check_sum(self) -> "MetricWeights":
        check_weight_sum(self.target, self.deadline, self.third_axis)
        return self

    @classmethod
    def equal(cls) -> "MetricWeights":
        """Equal thirds, the weighting used with the progress axis."""
        return cls(target=1 / 3, deadline=1 / 3, third_axis=1 / 3)


# =============================================================================
# Similarity Results
# =============================================================================


class SimilarityDetails(BaseModel):
    """Per-metric similarity values, each in [0, 1]."""

    target: float = Field(ge=0, le=1)
    deadline: float = Field(ge=0, le=1)
    category: Optional[float] = Field(default=None, ge=0, le=1)
    progress: Optional[float] = Field(default=None, ge=0, le=1)


class SimilarityScore(BaseModel):
    """Composite similarity with its per-metric breakdown."""

    score: float = Field(ge=0, le=1)
    details: SimilarityDetails


class ScoredCampaign(BaseModel):
    """A campaign ranked against a focal campaign."""

    campaign: Campaign
    score: float = Field(ge=0, le=1)
    details: SimilarityDetails
    label: str


class SimilarityScores(BaseModel):
    """All scores of one campaign against the rest of a collection."""

    campaign_id: int
    scores: dict[int, SimilarityScore]
    top_similar: list[int]


# =============================================================================
# Grouping Results
# =============================================================================


class CampaignGroup(BaseModel):
    """A cluster of mutually similar campaigns."""

    id: str
    name: str
    campaigns: list[Campaign]
    average_target: float
    average_deadline: float

    @computed_field
    @property
    def size(self) -> int:
        return len(self.campaigns)

    def campaign_ids(self) -> list[int]:
        return [campaign.id for campaign in self.campaigns]


class GroupingResult(BaseModel):
    """Non-singleton groups plus the ungrouped complement."""

    groups: list[CampaignGroup]
    other: list[Campaign]
    threshold: float
    strategy: str


# =============================================================================
# Campaign Summaries
# =============================================================================


class CampaignSummary(BaseModel):
    """Lifecycle facts about one campaign at a point in time."""

    campaign: Campaign
    status: CampaignStatus
    is_active: bool
    time_left: str
    progress_percent: float
    target_range: str


class CollectionStats(BaseModel):
    """Totals over a campaign collection."""

    total_campaigns: int
    total_raised: str
    active_campaigns: int
    claimed_campaigns: int
