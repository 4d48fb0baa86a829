import pytest

from node_ps.config import ConfigurationError, WrapperSettings
from node_ps.config.settings import FORCE_KILL_TIMEOUT_SECONDS, GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS


def test_defaults():
    settings = WrapperSettings()

    assert settings.graceful_timeout_seconds == GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS
    assert settings.force_timeout_seconds == FORCE_KILL_TIMEOUT_SECONDS
    assert settings.suppress_console_output is False


@pytest.mark.parametrize("field", ["graceful_timeout_seconds", "force_timeout_seconds"])
def test_rejects_negative_timeouts(field):
    with pytest.raises(ConfigurationError, match=field):
        WrapperSettings(**{field: -1.0})


def test_from_env_without_overrides_uses_defaults():
    assert WrapperSettings.from_env() == WrapperSettings()


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("NODE_PS_GRACEFUL_TIMEOUT_SECONDS", "10")
    monkeypatch.setenv("NODE_PS_FORCE_TIMEOUT_SECONDS", "0.5")
    monkeypatch.setenv("MANAGED_BY_MONITOR", "true")

    settings = WrapperSettings.from_env()

    assert settings == WrapperSettings(
        graceful_timeout_seconds=10.0,
        force_timeout_seconds=0.5,
        suppress_console_output=True,
    )


def test_from_env_rejects_malformed_values(monkeypatch):
    monkeypatch.setenv("NODE_PS_GRACEFUL_TIMEOUT_SECONDS", "three")

    with pytest.raises(ConfigurationError):
        WrapperSettings.from_env()


def test_from_env_ignores_dotenv_files(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("NODE_PS_GRACEFUL_TIMEOUT_SECONDS=-1\nNODE_PS_FORCE_TIMEOUT_SECONDS=9\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert WrapperSettings.from_env() == WrapperSettings()
