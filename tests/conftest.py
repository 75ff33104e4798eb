"""
Pytest configuration for campaign-similarity tests.

Campaign deadlines are built relative to a fixed reference time so that
status and deadline similarity do not depend on the wall clock.
"""

from pathlib import Path

import pytest

from campaign_similarity.core.config import get_settings
from campaign_similarity.core.models import Campaign
from campaign_similarity.core.types import SECONDS_PER_DAY

FIXTURES_DIR = Path(__file__).parent / "fixtures"

NOW = 1_700_000_000
DAY = SECONDS_PER_DAY


def make_campaign(
    id: int,
    target: str = "1",
    deadline: int = NOW,
    title: str = "",
    description: str = "",
    collected: str = "0",
    claimed: bool = False,
) -> Campaign:
    return Campaign(
        id=id,
        owner=f"0x{id:040x}",
        title=title,
        description=description,
        target=target,
        deadline=deadline,
        amountCollected=collected,
        claimed=claimed,
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Isolate each test from cached settings and any local .env file."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def solar_campaigns():
    """Three near-identical solar campaigns mixed with two unrelated ones."""
    c1 = make_campaign(1, "2.5", NOW, "Solar Panels", "for village school")
    c2 = make_campaign(2, "2.6", NOW + DAY, "Solar Panels", "for village clinic")
    c3 = make_campaign(3, "2.4", NOW + 2 * DAY, "Solar Panels", "for village library")
    c4 = make_campaign(4, "50", NOW + 90 * DAY, "Indie Film", "production budget")
    c5 = make_campaign(5, "0.1", NOW + 200 * DAY, "Marathon Run", "charity shoes")
    return [c1, c4, c2, c5, c3]


@pytest.fixture
def chain_campaigns():
    """A-B and B-C score 0.92 but A-C only 0.856 (same text and deadline)."""
    text = {"title": "Clean Water Wells", "description": "drilling wells for villages"}
    a = make_campaign(1, "10", NOW, **text)
    b = make_campaign(2, "8", NOW, **text)
    c = make_campaign(3, "6.4", NOW, **text)
    return a, b, c


@pytest.fixture
def snapshot_path():
    return FIXTURES_DIR / "campaigns.json"
