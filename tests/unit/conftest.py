"""Shared fakes for CodeAuth unit tests (no network)."""

from __future__ import annotations

from typing import Any, Callable, Mapping

import pytest

from codeauth import facade as _facade


class FakeClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTransport:
    """Records every call and answers from a per-path script."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self._responses: dict[str, list[dict[str, Any]] | Callable[..., dict[str, Any]]] = {}
        self.closed = False

    def respond(self, path: str, *envelopes: dict[str, Any]) -> None:
        """Queue envelopes for *path*; the last one repeats once exhausted."""
        self._responses[path] = list(envelopes)

    def call(self, path: str, fields: Mapping[str, Any]) -> dict[str, Any]:
        self.calls.append((path, dict(fields)))
        queued = self._responses.get(path)
        if not queued:
            return {"error": "connection_error"}
        envelope = queued.pop(0) if len(queued) > 1 else queued[0]
        return dict(envelope)

    def paths(self) -> list[str]:
        return [p for p, _ in self.calls]

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def reset_facade(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start each facade test with no process-wide client installed."""
    monkeypatch.setattr(_facade, "_default_client", None, raising=True)
