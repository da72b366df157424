"""Tests for building CodeAuthConfig from CODEAUTH_* environment variables."""

from __future__ import annotations

import pytest

from codeauth.environment import config_from_env

_VARS = (
    "ENDPOINT",
    "PROJECT_ID",
    "USE_CACHE",
    "CACHE_DURATION",
    "TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"CODEAUTH_{name}", raising=False)


def test_missing_required_returns_none(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODEAUTH_ENDPOINT", "api.example.com")
    assert config_from_env() is None


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODEAUTH_ENDPOINT", "api.example.com")
    monkeypatch.setenv("CODEAUTH_PROJECT_ID", "proj1")

    cfg = config_from_env()
    assert cfg is not None
    assert cfg.use_cache is True
    assert cfg.cache_duration == 30
    assert cfg.timeout is None
    assert cfg.base_url == "https://api.example.com"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("true", True), ("YES", True), ("1", True), ("off", False), ("0", False), ("nope", False)],
)
def test_use_cache_flag(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("CODEAUTH_ENDPOINT", "api.example.com")
    monkeypatch.setenv("CODEAUTH_PROJECT_ID", "proj1")
    monkeypatch.setenv("CODEAUTH_USE_CACHE", raw)

    cfg = config_from_env()
    assert cfg is not None and cfg.use_cache is expected


def test_custom_prefix_and_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MYAPP_AUTH_ENDPOINT", "auth.example.org")
    monkeypatch.setenv("MYAPP_AUTH_PROJECT_ID", "p2")
    monkeypatch.setenv("MYAPP_AUTH_CACHE_DURATION", "45")
    monkeypatch.setenv("MYAPP_AUTH_TIMEOUT", "2.5")

    cfg = config_from_env("MYAPP_AUTH_")
    assert cfg is not None
    assert (cfg.endpoint, cfg.project_id, cfg.cache_duration, cfg.timeout) == (
        "auth.example.org",
        "p2",
        45,
        2.5,
    )


def test_bad_cache_duration_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODEAUTH_ENDPOINT", "api.example.com")
    monkeypatch.setenv("CODEAUTH_PROJECT_ID", "proj1")
    monkeypatch.setenv("CODEAUTH_CACHE_DURATION", "thirty")
    with pytest.raises(ValueError, match="CACHE_DURATION"):
        config_from_env()
