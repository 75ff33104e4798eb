"""
Campaign service - lifecycle facts the client shows next to each campaign.

Status and activity follow the contract's rules: a campaign accepts
donations until it is claimed, its deadline passes, or its target is met.
Amounts are compared as exact decimals; nothing here is scored.
"""

import logging
import time
from decimal import Decimal, localcontext
from typing import Iterable, Optional

from ..core.models import Campaign, CampaignSummary, CollectionStats
from ..core.types import TARGET_RANGES, CampaignStatus, get_target_range
from ..similarity.metrics import progress_ratio

logger = logging.getLogger(__name__)


def _now(now: Optional[int]) -> int:
    return int(time.time()) if now is None else now


def _target_reached(campaign: Campaign) -> bool:
    return Decimal(campaign.amount_collected) >= Decimal(campaign.target)


def _total_to_cents(amounts: list[Decimal]) -> Decimal:
    """Exact sum rounded to 2 places, however many digits the amounts carry."""
    integer_digits = max((max(a.adjusted(), 0) + 1 for a in amounts), default=1)
    fraction_digits = max((max(-a.as_tuple().exponent, 0) for a in amounts), default=0)
    with localcontext() as ctx:
        # room for the carry of the sum and the two quantized places
        ctx.prec = integer_digits + fraction_digits + len(str(len(amounts))) + 2
        return sum(amounts, Decimal("0")).quantize(Decimal("0.01"))


def get_time_left(deadline: int, now: Optional[int] = None) -> str:
    """Remaining time as 'Xd Yh Zm', or 'Ended' once the deadline has passed."""
    remaining = deadline - _now(now)
    if remaining <= 0:
        return "Ended"

    days, remainder = divmod(remaining, 24 * 60 * 60)
    hours, remainder = divmod(remainder, 60 * 60)
    minutes = remainder // 60
    return f"{days}d {hours}h {minutes}m"


def get_campaign_status(campaign: Campaign, now: Optional[int] = None) -> CampaignStatus:
    """
    Lifecycle status, checked in order: claimed, expired, funded, active.
    """
    if campaign.claimed:
        return CampaignStatus.COMPLETED
    if campaign.deadline <= _now(now):
        return CampaignStatus.DEADLINE_PASSED
    if _target_reached(campaign):
        return CampaignStatus.TARGET_REACHED
    return CampaignStatus.ACTIVE


def is_campaign_active(campaign: Campaign, now: Optional[int] = None) -> bool:
    """Whether the campaign still accepts donations."""
    return get_campaign_status(campaign, now) is CampaignStatus.ACTIVE


def get_progress_percent(campaign: Campaign) -> float:
    """Funding progress in percent, one decimal (can exceed 100)."""
    return round(progress_ratio(campaign) * 100, 1)


def summarize_campaign(campaign: Campaign, now: Optional[int] = None) -> CampaignSummary:
    now = _now(now)
    status = get_campaign_status(campaign, now)
    return CampaignSummary(
        campaign=campaign,
        status=status,
        is_active=status is CampaignStatus.ACTIVE,
        time_left=get_time_left(campaign.deadline, now),
        progress_percent=get_progress_percent(campaign),
        target_range=get_target_range(campaign.target_value).label,
    )


def group_by_target_range(campaigns: Iterable[Campaign]) -> dict[str, list[Campaign]]:
    """
    Section campaigns by funding goal ("0-1", "1-5", "5-10", "10+").

    Only non-empty sections are returned, in ascending range order; campaigns
    keep their input order inside a section.
    """
    sections: dict[str, list[Campaign]] = {r.label: [] for r in TARGET_RANGES}
    for campaign in campaigns:
        sections[get_target_range(campaign.target_value).label].append(campaign)
    return {label: members for label, members in sections.items() if members}


def get_collection_stats(
    campaigns: Iterable[Campaign],
    now: Optional[int] = None,
) -> CollectionStats:
    """Totals over a collection; total_raised is an exact sum to 2 places."""
    campaigns = list(campaigns)
    now = _now(now)

    total_raised = _total_to_cents([Decimal(c.amount_collected) for c in campaigns])
    active = sum(1 for c in campaigns if is_campaign_active(c, now))
    claimed = sum(1 for c in campaigns if c.claimed)

    logger.debug("Summarized %d campaigns (%d active)", len(campaigns), active)

    return CollectionStats(
        total_campaigns=len(campaigns),
        total_raised=str(total_raised),
        active_campaigns=active,
        claimed_campaigns=claimed,
    )
