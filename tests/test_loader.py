"""
Tests for campaign snapshot loading and validation.
"""

import json

import pytest

from campaign_similarity.core.models import Campaign
from campaign_similarity.fixtures import load_campaigns, parse_campaigns


class TestCampaignModel:
    def test_accepts_contract_field_names(self):
        campaign = Campaign.model_validate(
            {"id": 1, "target": "2.5", "deadline": 100, "amountCollected": "0.5"}
        )
        assert campaign.amount_collected == "0.5"
        assert campaign.collected_value == 0.5
        assert campaign.model_dump(by_alias=True)["amountCollected"] == "0.5"

    def test_numbers_become_decimal_strings(self):
        campaign = Campaign(id=1, target=3, deadline=100, amount_collected=1.5)
        assert campaign.target == "3"
        assert campaign.amount_collected == "1.5"

    @pytest.mark.parametrize("bad", ["abc", "", "NaN", "Infinity", True])
    def test_rejects_invalid_amounts(self, bad):
        with pytest.raises(ValueError):
            Campaign(id=1, target=bad, deadline=100)

    def test_ignores_unknown_fields(self):
        campaign = Campaign.model_validate(
            {"id": 1, "target": "1", "deadline": 100, "donators": ["0xabc"]}
        )
        assert campaign.id == 1
        assert campaign.claimed is False


class TestParseCampaigns:
    def test_list(self):
        campaigns = parse_campaigns([{"id": 2, "target": "1", "deadline": 5}])
        assert [c.id for c in campaigns] == [2]

    def test_wrapped(self):
        data = {"campaigns": [{"id": 1, "target": "1", "deadline": 5}]}
        assert len(parse_campaigns(data)) == 1

    def test_rejects_other_shapes(self):
        with pytest.raises(ValueError):
            parse_campaigns({"items": []})
        with pytest.raises(ValueError):
            parse_campaigns("campaigns")

    def test_rejects_duplicate_ids(self):
        data = [
            {"id": 1, "target": "1", "deadline": 5},
            {"id": 1, "target": "2", "deadline": 6},
        ]
        with pytest.raises(ValueError, match="unique"):
            parse_campaigns(data)


class TestLoadCampaigns:
    def test_snapshot_file(self, snapshot_path):
        campaigns = load_campaigns(snapshot_path)

        assert [c.id for c in campaigns] == [1, 3, 4, 5, 2]
        assert campaigns[0].title == "Education Support for Rural Schools"
        assert campaigns[0].image.startswith("https://")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_campaigns(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{")
        with pytest.raises(json.JSONDecodeError):
            load_campaigns(path)
