"""Tests for settings loading and logging setup."""

import logging
import sys
import os
import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from partition_bins import Bin, SitePartition
from partition_bins.config import BinSettings, configure_logging, load_settings


class TestBinSettings:
    def test_defaults(self):
        settings = BinSettings()
        assert settings.log_level == "INFO"
        assert settings.row_columns == {"partition": "id", "cost": "cost", "sites": "sites"}
        assert settings.telegram_chat_id is None

    def test_log_level_normalized(self):
        assert BinSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            BinSettings(log_level="chatty")

    def test_row_columns_drive_to_rows(self):
        settings = BinSettings()
        b = Bin().add([SitePartition("p1", 2, ["a"])])
        assert b.to_rows(settings.row_columns) == [{"partition": "p1", "cost": 2, "sites": 1}]


class TestLoadSettings:
    def test_none_gives_defaults(self):
        assert load_settings() == BinSettings()

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "log_level: warning\n"
            "telegram_chat_id: '-100123'\n"
            "row_columns:\n"
            "  Partition: id\n"
            "  Site IDs: site_ids\n"
        )
        settings = load_settings(path)
        assert settings.log_level == "WARNING"
        assert settings.telegram_chat_id == "-100123"
        assert settings.row_columns == {"Partition": "id", "Site IDs": "site_ids"}

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(str(path)) == BinSettings()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must contain a mapping"):
            load_settings(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "missing.yaml")

    def test_invalid_value_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("row_columns: 5\n")
        with pytest.raises(ValidationError):
            load_settings(path)


def test_configure_logging_sets_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(BinSettings(log_level="debug"))
    assert calls[0]["level"] == "DEBUG"
    assert "%(levelname)s" in calls[0]["format"]


def test_bin_logs_add_and_resync(caplog):
    caplog.set_level(logging.DEBUG, logger="partition_bins.core.bin")
    p = SitePartition("p1", 2)
    b = Bin().add([p])
    p.op_optimized = 5
    b.resync_size()
    messages = [r.getMessage() for r in caplog.records]
    assert "Added 1 partition(s), size now 2" in messages
    assert "Resynced size 2 -> 5" in messages
