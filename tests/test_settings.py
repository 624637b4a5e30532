import pytest
from pydantic import ValidationError

from coinrunner.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # Keep a developer's .env and shell out of the results
    monkeypatch.chdir(tmp_path)
    for key in [
        "COINRUNNER_DEBUG",
        "COINRUNNER_SPAWN_POLICY",
        "COINRUNNER_LOG_FILE",
        "COINRUNNER_DISPLAY__WIDTH",
        "COINRUNNER_DISPLAY__HEIGHT",
        "COINRUNNER_AUDIO__VOLUME",
        "COINRUNNER_AUDIO__ENABLED",
    ]:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    s = Settings()

    assert s.debug is False
    assert s.spawn_policy == "timed"
    assert s.log_file is None
    assert (s.display.width, s.display.height, s.display.fps) == (960, 540, 60)
    assert s.display.fullscreen is False
    assert s.audio.enabled is True
    assert s.audio.volume == 1.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COINRUNNER_DEBUG", "true")
    monkeypatch.setenv("COINRUNNER_SPAWN_POLICY", "probability")
    monkeypatch.setenv("COINRUNNER_DISPLAY__WIDTH", "1280")
    monkeypatch.setenv("COINRUNNER_AUDIO__ENABLED", "false")

    s = Settings()

    assert s.debug is True
    assert s.spawn_policy == "probability"
    assert s.display.width == 1280
    assert s.display.height == 540
    assert s.audio.enabled is False


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("COINRUNNER_LOG_FILE=runner.log\n")

    s = Settings()

    assert s.log_file is not None
    assert s.log_file.name == "runner.log"


def test_unknown_spawn_policy_rejected(monkeypatch):
    monkeypatch.setenv("COINRUNNER_SPAWN_POLICY", "bursty")
    with pytest.raises(ValidationError):
        Settings()


def test_volume_out_of_range_rejected(monkeypatch):
    monkeypatch.setenv("COINRUNNER_AUDIO__VOLUME", "1.5")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
