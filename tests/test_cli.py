"""
Tests for the command-line interface.
"""

import json

import pytest

from campaign_similarity.cli import main
from conftest import DAY, NOW


@pytest.fixture
def campaigns_file(tmp_path):
    data = [
        {"id": 1, "title": "Solar Panels", "description": "for village school",
         "target": "2.5", "deadline": NOW, "amountCollected": "0.5"},
        {"id": 2, "title": "Indie Film", "description": "production budget",
         "target": "50", "deadline": NOW + 90 * DAY, "amountCollected": "60"},
        {"id": 3, "title": "Solar Panels", "description": "for village clinic",
         "target": "2.6", "deadline": NOW + DAY, "amountCollected": "1.3"},
    ]
    path = tmp_path / "campaigns.json"
    path.write_text(json.dumps(data))
    return path


class TestSimilarCommand:
    def test_json_output(self, campaigns_file, capsys):
        assert main(["--json", "similar", str(campaigns_file), "--id", "1"]) == 0
        results = json.loads(capsys.readouterr().out)

        assert [r["campaign"]["id"] for r in results] == [3, 2]
        assert results[0]["label"] == "Very Similar"

    def test_progress_axis(self, campaigns_file, capsys):
        args = ["--json", "similar", str(campaigns_file), "--id", "1", "--third-axis", "progress"]
        assert main(args) == 0
        results = json.loads(capsys.readouterr().out)
        assert results[0]["details"]["progress"] is not None

    def test_text_output(self, campaigns_file, capsys):
        assert main(["similar", str(campaigns_file), "--id", "1", "--limit", "1"]) == 0
        out = capsys.readouterr().out
        assert "Campaigns similar to #1" in out
        assert "[3] Solar Panels" in out
        assert "Indie Film" not in out

    def test_unknown_id(self, campaigns_file, capsys):
        assert main(["similar", str(campaigns_file), "--id", "9"]) == 0
        assert "No similar campaigns found" in capsys.readouterr().out


class TestGroupsCommand:
    def test_json_output(self, campaigns_file, capsys):
        assert main(["--json", "groups", str(campaigns_file)]) == 0
        result = json.loads(capsys.readouterr().out)

        assert [c["id"] for c in result["groups"][0]["campaigns"]] == [1, 3]
        assert [c["id"] for c in result["other"]] == [2]

    def test_text_output(self, campaigns_file, capsys):
        args = ["groups", str(campaigns_file), "--strategy", "connected_components"]
        assert main(args) == 0
        out = capsys.readouterr().out
        assert "Solar Group (2 campaigns)" in out
        assert "Other campaigns" in out


class TestExplainCommand:
    def test_explain(self, campaigns_file, capsys):
        assert main(["explain", str(campaigns_file), "--id", "1", "--other", "3"]) == 0
        assert "Overall:" in capsys.readouterr().out

    def test_missing_campaign(self, campaigns_file):
        assert main(["explain", str(campaigns_file), "--id", "1", "--other", "7"]) == 1


class TestSectionsCommand:
    def test_json_output(self, campaigns_file, capsys):
        assert main(["--json", "sections", str(campaigns_file), "--now", str(NOW - DAY)]) == 0
        data = json.loads(capsys.readouterr().out)

        assert data["stats"]["total_raised"] == "61.80"
        assert data["stats"]["active_campaigns"] == 2
        assert list(data["sections"]) == ["1-5", "10+"]
        film = data["sections"]["10+"][0]
        assert film["status"] == "Target Reached"
        assert film["progress_percent"] == 120.0

    def test_text_output(self, campaigns_file, capsys):
        assert main(["sections", str(campaigns_file), "--now", str(NOW + 365 * DAY)]) == 0
        out = capsys.readouterr().out
        assert "Total campaigns: 3" in out
        assert "Deadline Passed" in out
        assert "Ended" in out


class TestMisc:
    def test_status(self, capsys):
        assert main(["--json", "status"]) == 0
        status = json.loads(capsys.readouterr().out)
        assert status["methodology"]["default_limit"] == 3

    def test_missing_file(self, tmp_path):
        assert main(["groups", str(tmp_path / "nope.json")]) == 1

    def test_invalid_records(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"id": 1, "target": "lots", "deadline": 1}]))
        assert main(["groups", str(path)]) == 1

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


def test_groups_over_sample_snapshot(snapshot_path, capsys):
    assert main(["--json", "groups", str(snapshot_path), "--threshold", "0.5"]) == 0
    result = json.loads(capsys.readouterr().out)

    grouped = [c["id"] for g in result["groups"] for c in g["campaigns"]]
    other = [c["id"] for c in result["other"]]
    assert sorted(grouped + other) == [1, 2, 3, 4, 5]
