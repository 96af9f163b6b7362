"""
Tests for the feeder-report command
"""

import json

import pytest

from transformer_inventory.reporting.cli import main


@pytest.fixture
def dataset(data_dir):
    return str(data_dir / "feeder_analysis_table.json")


class TestFeederReportCli:

    def test_json_system_total(self, dataset, capsys):
        assert main([dataset, "--format", "json"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["grand_total"]["label"] == "System Total"
        assert out["grand_total"]["transformer_count"] == 10
        assert [g["feeder_number"] for g in out["groups"]] == [101, 104, 301, 323, 1203, 1209]

    def test_substation_total_ignores_feeder(self, dataset, capsys):
        assert main([dataset, "-s", "1", "-f", "104", "--format", "json"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert [g["feeder_number"] for g in out["groups"]] == [104]
        assert out["grand_total"]["label"] == "Substation 1 Total"
        assert out["grand_total"]["transformer_count"] == 6

    def test_query_and_no_blocks(self, dataset, capsys):
        assert main([dataset, "-q", "theiss", "--no-blocks", "--format", "json"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert [g["label"] for g in out["groups"]] == ["THEISS 3", "THEISS 9"]
        assert out["show_blocks"] is False

    def test_table_output(self, dataset, capsys):
        assert main([dataset]) == 0
        out = capsys.readouterr().out
        assert "Feeder 101 Total" in out
        assert "System Total" in out

    def test_csv_to_file(self, dataset, tmp_path):
        target = tmp_path / "report.csv"
        assert main([dataset, "--format", "csv", "-o", str(target)]) == 0
        assert target.read_text().splitlines()[0].startswith("kind,label,block")

    def test_config_file(self, dataset, data_dir, capsys):
        args = [dataset, "-s", "theiss", "--config", str(data_dir / "overrides.json"), "--format", "json"]
        assert main(args) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["grand_total"]["label"] == "Theiss Substation Total"

    def test_missing_dataset(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.json")]) == 2
        assert "Input error" in capsys.readouterr().err

    def test_unknown_substation(self, dataset, capsys):
        assert main([dataset, "-s", "42"]) == 2
        assert "Unknown substation" in capsys.readouterr().err

    def test_invalid_config(self, dataset, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"substation_overrides": {"1203": " "}}))
        assert main([dataset, "--config", str(bad)]) == 2
        assert "Config validation error" in capsys.readouterr().err

    def test_html_file_keeps_non_ascii_labels(self, dataset, tmp_path):
        config = tmp_path / "labels.json"
        config.write_bytes(json.dumps({"feeder_labels": {"1203": "Théiss 3"}}, ensure_ascii=False).encode("utf-8"))
        target = tmp_path / "report.html"
        assert main([dataset, "--config", str(config), "--format", "html", "-o", str(target)]) == 0
        assert "Théiss 3" in target.read_bytes().decode("utf-8")
