import pytest

from node_ps.config import ConfigurationError, runtime


def test_env_str_handles_blanks_and_defaults(monkeypatch):
    monkeypatch.delenv("UNSET_VALUE", raising=False)
    assert runtime.env_str("UNSET_VALUE", or_value="fallback") == "fallback"

    monkeypatch.setenv("BLANK", "   ")
    assert runtime.env_str("BLANK", or_value="fallback") == "fallback"

    monkeypatch.setenv("ALLOW_BLANK", "")
    assert runtime.env_str("ALLOW_BLANK", allow_blank=True) == ""

    monkeypatch.setenv("NO_STRIP", " padded ")
    assert runtime.env_str("NO_STRIP", strip=False) == " padded "

    monkeypatch.delenv("MISSING_REQUIRED", raising=False)
    with pytest.raises(ConfigurationError):
        runtime.env_str("MISSING_REQUIRED", required=True)


def test_env_str_ignores_dotenv_files(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("DOTENV_ONLY=from_file\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("DOTENV_ONLY", raising=False)

    assert runtime.env_str("DOTENV_ONLY") is None


def test_env_float_validation(monkeypatch):
    monkeypatch.setenv("FLOAT_VALUE", "2.5")
    assert runtime.env_float("FLOAT_VALUE") == 2.5

    monkeypatch.delenv("FLOAT_MISSING", raising=False)
    assert runtime.env_float("FLOAT_MISSING", or_value=1.0) == 1.0
    with pytest.raises(ConfigurationError):
        runtime.env_float("FLOAT_MISSING", required=True)

    monkeypatch.setenv("FLOAT_INVALID", "soon")
    with pytest.raises(ConfigurationError):
        runtime.env_float("FLOAT_INVALID")


def test_env_bool_parsing(monkeypatch):
    monkeypatch.setenv("BOOL_TRUE", "Yes")
    monkeypatch.setenv("BOOL_FALSE", "off")
    monkeypatch.setenv("BOOL_BAD", "maybe")

    assert runtime.env_bool("BOOL_TRUE") is True
    assert runtime.env_bool("BOOL_FALSE") is False
    with pytest.raises(ConfigurationError):
        runtime.env_bool("BOOL_BAD")


def test_env_seconds_rejects_negative(monkeypatch):
    monkeypatch.setenv("SECONDS", "-1")
    with pytest.raises(ConfigurationError):
        runtime.env_seconds("SECONDS")

    monkeypatch.setenv("SECONDS", "0.5")
    assert runtime.env_seconds("SECONDS") == 0.5
