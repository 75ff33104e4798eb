"""
Campaigns router - lifecycle summaries for the posted campaign snapshot.

Endpoints:
- POST /summary - Collection totals, per-campaign status and target-range sections
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...core.models import Campaign, CampaignSummary, CollectionStats
from ...services.campaigns import (
    get_collection_stats,
    group_by_target_range,
    summarize_campaign,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class SummaryRequest(BaseModel):
    campaigns: list[Campaign]
    now: Optional[int] = Field(
        default=None,
        description="Reference Unix time in seconds (defaults to server time)",
    )


class SummaryResponse(BaseModel):
    stats: CollectionStats
    campaigns: list[CampaignSummary]
    sections: dict[str, list[int]] = Field(description="Target range label -> campaign ids")


@router.post("/summary", response_model=SummaryResponse)
def summarize_campaigns(request: SummaryRequest) -> SummaryResponse:
    """
    Summarize the posted campaigns.

    Status precedence: claimed, deadline passed, target reached, active.
    """
    now = int(time.time()) if request.now is None else request.now
    sections = group_by_target_range(request.campaigns)
    return SummaryResponse(
        stats=get_collection_stats(request.campaigns, now=now),
        campaigns=[summarize_campaign(c, now=now) for c in request.campaigns],
        sections={label: [c.id for c in members] for label, members in sections.items()},
    )
