"""
Campaign snapshot loader.

Reads campaign records exported by the contract reader. Supported JSON
shapes:

    [
        {
            "id": 1,
            "owner": "0x123...",
            "title": "Education Support for Rural Schools",
            "description": "...",
            "target": "2.5",
            "deadline": 1735689600,
            "amountCollected": "0.5",
            "claimed": false
        },
        ...
    ]

or the same list wrapped as ``{"campaigns": [...]}``. Unknown keys are
ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from ..core.models import Campaign

logger = logging.getLogger(__name__)

_CAMPAIGN_LIST = TypeAdapter(list[Campaign])


def parse_campaigns(data: Any) -> list[Campaign]:
    """
    Validate raw JSON data into Campaign records.

    Args:
        data: A list of campaign objects or a dict with a "campaigns" list

    Returns:
        Campaigns in input order

    Raises:
        ValueError: If the data is not a campaign list or a record is invalid
    """
    if isinstance(data, dict):
        data = data.get("campaigns")
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of campaigns or an object with a 'campaigns' array")

    campaigns = _CAMPAIGN_LIST.validate_python(data)

    ids = [c.id for c in campaigns]
    if len(ids) != len(set(ids)):
        raise ValueError("campaign ids must be unique")

    return campaigns


def load_campaigns(file_path: str | Path) -> list[Campaign]:
    """
    Load campaigns from a JSON file.

    Args:
        file_path: Path to the JSON snapshot

    Returns:
        Campaigns in file order
    """
    path = Path(file_path)
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    campaigns = parse_campaigns(data)
    logger.info("Loaded %d campaigns from %s", len(campaigns), path)
    return campaigns
