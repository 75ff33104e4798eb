"""
Tests for the similarity service.
"""

import pytest

from campaign_similarity.core.config import Settings
from campaign_similarity.core.models import MetricWeights
from campaign_similarity.services.similarity import SimilarityService
from conftest import NOW, make_campaign


@pytest.fixture
def service():
    return SimilarityService(Settings())


class TestFindSimilar:
    def test_default_limit_from_settings(self, service, solar_campaigns):
        results = service.find_similar(solar_campaigns, 1)
        assert [r.campaign.id for r in results] == [2, 3, 4]

    def test_explicit_limit(self, service, solar_campaigns):
        assert len(service.find_similar(solar_campaigns, 1, limit=1)) == 1

    def test_unknown_id(self, service, solar_campaigns):
        assert service.find_similar(solar_campaigns, 42) == []

    def test_none_rejected(self, service):
        with pytest.raises(ValueError):
            service.find_similar(None, 1)

    def test_progress_override(self, service):
        campaigns = [
            make_campaign(1, "2", NOW, "Alpha", collected="1"),
            make_campaign(2, "2", NOW, "Beta", collected="1"),
            make_campaign(3, "2", NOW, "Alpha", collected="0"),
        ]
        results = service.find_similar(
            campaigns, 1, weights=MetricWeights.equal(), third_axis="progress"
        )
        assert [r.campaign.id for r in results] == [2, 3]
        assert results[0].details.progress == pytest.approx(1.0)

        default = service.find_similar(campaigns, 1)
        assert [r.campaign.id for r in default] == [3, 2]


class TestGroupAndCompare:
    def test_group_uses_settings(self, solar_campaigns):
        service = SimilarityService(Settings(similarity_threshold=0.91))
        result = service.group(solar_campaigns)
        assert result.threshold == 0.91
        assert [g.campaign_ids() for g in result.groups] == [[1, 2]]

    def test_group_strategy_override(self, service, chain_campaigns):
        a, b, c = chain_campaigns
        result = service.group([a, b, c], threshold=0.9, strategy="connected_components")
        assert result.groups[0].campaign_ids() == [1, 2, 3]

    def test_compare(self, service, solar_campaigns):
        similarity, explanation = service.compare(solar_campaigns, 1, 2)
        assert similarity.score > 0.9
        assert "Overall:" in explanation

    def test_compare_missing(self, service, solar_campaigns):
        assert service.compare(solar_campaigns, 1, 99) is None


class TestGroupOverrides:
    @pytest.fixture
    def campaigns(self):
        return [
            make_campaign(1, "2", NOW, "Alpha", collected="1"),
            make_campaign(2, "2", NOW, "Beta", collected="1"),
            make_campaign(3, "2", NOW, "Alpha", collected="0"),
        ]

    def test_default_scoring(self, service, campaigns):
        result = service.group(campaigns, threshold=0.9)
        assert [g.campaign_ids() for g in result.groups] == [[1, 3]]

    def test_progress_weights(self, service, campaigns):
        result = service.group(
            campaigns,
            threshold=0.9,
            weights=MetricWeights.equal(),
            third_axis="progress",
        )
        assert [g.campaign_ids() for g in result.groups] == [[1, 2]]
        assert [c.id for c in result.other] == [3]
