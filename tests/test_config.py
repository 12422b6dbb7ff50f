"""Tests for Settings.from_env."""

from config import Settings, configure_logging


def test_defaults_from_empty_env():
    settings = Settings.from_env(env={})
    assert settings == Settings()
    assert settings.card_title == "Hello World"


def test_reads_environment_values():
    settings = Settings.from_env(
        env={
            "LOG_LEVEL": "debug",
            "SKILL_HOST": "127.0.0.1",
            "SKILL_PORT": "9000",
            "SKILL_CARD_TITLE": "Greeter",
        }
    )
    assert settings.log_level == "DEBUG"
    assert settings.host == "127.0.0.1"
    assert settings.port == 9000
    assert settings.card_title == "Greeter"


def test_invalid_port_falls_back(caplog):
    settings = Settings.from_env(env={"SKILL_PORT": "eighty"})
    assert settings.port == 8000
    assert "SKILL_PORT" in caplog.text


def test_invalid_log_level_falls_back(caplog):
    settings = Settings.from_env(env={"LOG_LEVEL": "verbose"})
    assert settings.log_level == "INFO"
    assert "LOG_LEVEL" in caplog.text
    configure_logging(settings.log_level)


def test_known_log_level_kept():
    assert Settings.from_env(env={"LOG_LEVEL": "warning"}).log_level == "WARNING"
