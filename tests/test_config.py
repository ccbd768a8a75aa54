"""Tests for configuration loading."""

import pytest

from tasky.config import DEFAULT_DATA_FILE, load_config


@pytest.fixture(autouse=True)
def no_env_override(monkeypatch):
    monkeypatch.delenv("TASKY_DATA_FILE", raising=False)


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config.data_file == str(DEFAULT_DATA_FILE)
        assert config.telegram_bot_token == ""
        assert config.telegram_allowed_users == []

    def test_parses_values(self, tmp_path):
        conf = tmp_path / "tasky.conf"
        conf.write_text(
            "# comment\n"
            "\n"
            'DATA_FILE="~/my tasks.txt"  # quoted\n'
            "TELEGRAM_BOT_TOKEN=abc123 # inline comment\n"
            "TELEGRAM_ALLOWED_USERS=1, 2,3\n"
            "UNKNOWN_KEY=ignored\n"
            "no equals sign\n"
        )

        config = load_config(conf)

        assert config.data_file == "~/my tasks.txt"
        assert "~" not in str(config.data_path)
        assert config.telegram_bot_token == "abc123"
        assert config.telegram_allowed_users == [1, 2, 3]

    def test_bad_user_ids_are_ignored(self, tmp_path, caplog):
        conf = tmp_path / "tasky.conf"
        conf.write_text("TELEGRAM_ALLOWED_USERS=1,bob\n")

        config = load_config(conf)

        assert config.telegram_allowed_users == []
        assert "TELEGRAM_ALLOWED_USERS" in caplog.text

    def test_env_overrides_data_file(self, tmp_path, monkeypatch):
        conf = tmp_path / "tasky.conf"
        conf.write_text("DATA_FILE=/from/config.txt\n")
        monkeypatch.setenv("TASKY_DATA_FILE", "/from/env.txt")

        assert load_config(conf).data_file == "/from/env.txt"
