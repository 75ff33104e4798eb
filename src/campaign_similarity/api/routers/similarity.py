"""
Similarity router - ranks and groups the campaigns posted by the client.

Endpoints:
- POST /similar - Campaigns most similar to a focal campaign
- POST /groups - Similarity groups plus ungrouped campaigns
- POST /explain - Score breakdown for one pair

Data:
- The request carries the full campaign snapshot read from the contract
- Nothing is stored between requests
"""

import logging
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ..dependencies import SimilarityServiceDependency
from ..errors import NotFoundError, ValidationError
from ...core.models import (
    Campaign,
    GroupingResult,
    MetricWeights,
    ScoredCampaign,
    SimilarityScore,
)
from ...core.types import GroupingStrategy, ThirdAxis

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Request / Response Models
# =============================================================================


class WeightsPayload(BaseModel):
    """Composite weights as sent by the client (validated by the router)."""

    target: float
    deadline: float
    third_axis: float


class SimilarRequest(BaseModel):
    campaigns: list[Campaign]
    focal_id: int
    limit: Optional[int] = None
    weights: Optional[WeightsPayload] = None
    third_axis: Optional[ThirdAxis] = None


class SimilarResponse(BaseModel):
    focal_id: int
    similar_campaigns: list[ScoredCampaign]


class GroupsRequest(BaseModel):
    campaigns: list[Campaign]
    threshold: Optional[float] = None
    strategy: Optional[GroupingStrategy] = None
    weights: Optional[WeightsPayload] = None
    third_axis: Optional[ThirdAxis] = None


class ExplainRequest(BaseModel):
    campaigns: list[Campaign]
    campaign_id: int
    other_id: int


class ExplainResponse(BaseModel):
    campaign_id: int
    other_id: int
    similarity: SimilarityScore
    explanation: str = Field(description="Multi-line human-readable breakdown")


# =============================================================================
# Helper Functions
# =============================================================================


def _to_weights(payload: Optional[WeightsPayload]) -> Optional[MetricWeights]:
    if payload is None:
        return None
    try:
        return MetricWeights(
            target=payload.target,
            deadline=payload.deadline,
            third_axis=payload.third_axis,
        )
    except ValueError as e:
        raise ValidationError("Invalid metric weights", detail=str(e)) from e


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/similar", response_model=SimilarResponse)
def find_similar_campaigns(
    request: SimilarRequest,
    service: SimilarityServiceDependency,
) -> SimilarResponse:
    """
    Get the campaigns most similar to ``focal_id``.

    Each result carries the composite score (0.0 different to 1.0
    identical), a label and the per-metric breakdown. An unknown
    ``focal_id`` returns an empty list.
    """
    similar = service.find_similar(
        request.campaigns,
        request.focal_id,
        limit=request.limit,
        weights=_to_weights(request.weights),
        third_axis=request.third_axis,
    )
    return SimilarResponse(focal_id=request.focal_id, similar_campaigns=similar)


@router.post("/groups", response_model=GroupingResult)
def group_campaigns(
    request: GroupsRequest,
    service: SimilarityServiceDependency,
) -> GroupingResult:
    """
    Partition the posted campaigns into similarity groups.

    Groups hold two or more campaigns; the rest are returned as ``other``.
    """
    return service.group(
        request.campaigns,
        threshold=request.threshold,
        strategy=request.strategy,
        weights=_to_weights(request.weights),
        third_axis=request.third_axis,
    )


@router.post("/explain", response_model=ExplainResponse)
def explain_similarity(
    request: ExplainRequest,
    service: SimilarityServiceDependency,
) -> ExplainResponse:
    """Explain how two of the posted campaigns compare."""
    compared = service.compare(request.campaigns, request.campaign_id, request.other_id)
    if compared is None:
        present = {c.id for c in request.campaigns}
        identifier = request.campaign_id if request.campaign_id not in present else request.other_id
        raise NotFoundError(resource="Campaign", identifier=identifier, context="request")

    similarity, explanation = compared
    return ExplainResponse(
        campaign_id=request.campaign_id,
        other_id=request.other_id,
        similarity=similarity,
        explanation=explanation,
    )
