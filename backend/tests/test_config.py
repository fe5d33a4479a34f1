"""Settings: defaults and environment overrides."""

from pathlib import Path

from deckpool.config import Settings


def test_defaults(monkeypatch):
    for var in ("DATA_FILE", "LOG_LEVEL", "PORT", "HOST", "MAX_BODY_BYTES"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.data_file == Path("data.json")
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080
    assert settings.max_body_bytes == 4096
    assert settings.log_level == "DEBUG"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_FILE", str(tmp_path / "pool.json"))
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("log_level", "info")
    settings = Settings(_env_file=None)
    assert settings.data_file == tmp_path / "pool.json"
    assert settings.port == 9000
    assert settings.log_level == "INFO"
