"""Tests for the scripts/codeauth_call.py developer helper (no network)."""

from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

from codeauth.client import CodeAuthClient

_SCRIPT = Path(__file__).resolve().parents[3] / "scripts" / "codeauth_call.py"


def _load_script() -> ModuleType:
    spec = importlib.util.spec_from_file_location("codeauth_call", _SCRIPT)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def script(monkeypatch: pytest.MonkeyPatch, transport) -> ModuleType:
    module = _load_script()
    monkeypatch.setenv("CODEAUTH_ENDPOINT", "api.example.com")
    monkeypatch.setenv("CODEAUTH_PROJECT_ID", "proj1")
    monkeypatch.setattr(
        module,
        "CodeAuthClient",
        lambda config: CodeAuthClient(config, transport=transport),
        raising=True,
    )
    return module


def test_session_invalidate_default_type(script, transport, tmp_path, capsys) -> None:
    transport.respond("/session/invalidate", {"error": "no_error"})

    rc = script.main(["--env-file", str(tmp_path / "missing.env"), "session-invalidate", "tok1"])

    assert rc == 0
    assert transport.calls == [
        ("/session/invalidate", {"session_token": "tok1", "invalidate_type": "only_this"})
    ]
    assert json.loads(capsys.readouterr().out) == {"error": "no_error"}


def test_server_error_exit_code(script, transport, tmp_path, capsys) -> None:
    transport.respond("/signin/email", {"error": "bad_email"})

    rc = script.main(["--env-file", str(tmp_path / "missing.env"), "signin-email", "x"])

    assert rc == 1
    assert json.loads(capsys.readouterr().out)["error"] == "bad_email"


def test_env_file_does_not_override_environment(
    script, transport, tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / ".env.codeauth"
    env_file.write_text(
        "# comment\nCODEAUTH_PROJECT_ID=from-file\nCODEAUTH_CACHE_DURATION=60\n",
        encoding="utf-8",
    )
    # the env file writes os.environ directly; register the key so it is restored
    monkeypatch.setenv("CODEAUTH_CACHE_DURATION", "0")
    monkeypatch.delenv("CODEAUTH_CACHE_DURATION")
    seen: list[CodeAuthClient] = []

    def _factory(config):
        client = CodeAuthClient(config, transport=transport)
        seen.append(client)
        return client

    monkeypatch.setattr(script, "CodeAuthClient", _factory, raising=True)
    transport.respond("/signin/social", {"error": "no_error", "signin_url": "u"})

    script.main(["--env-file", str(env_file), "signin-social", "google"])

    assert seen[0].config.project_id == "proj1"
    assert seen[0].config.cache_duration == 60


def test_missing_config_exits(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    module = _load_script()
    monkeypatch.delenv("CODEAUTH_ENDPOINT", raising=False)
    monkeypatch.delenv("CODEAUTH_PROJECT_ID", raising=False)
    with pytest.raises(SystemExit):
        module.main(["--env-file", str(tmp_path / "none"), "session-info", "tok1"])
