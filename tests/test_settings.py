from infra.paths import LOG_DIR
from infra.settings import Settings


def test_settings_defaults(monkeypatch):
    for name in ("ARENA_LOG_LEVEL", "ARENA_LOG_JSON", "ARENA_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.log_file == LOG_DIR / "arena.log"


def test_settings_read_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("ARENA_LOG_LEVEL", "debug")
    monkeypatch.setenv("ARENA_LOG_JSON", "true")
    monkeypatch.setenv("ARENA_LOG_FILE", str(tmp_path / "arena.log"))

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
    assert settings.log_file == tmp_path / "arena.log"


def test_empty_log_file_disables_file_output(monkeypatch):
    monkeypatch.setenv("ARENA_LOG_FILE", "")

    assert Settings.from_env().log_file is None
