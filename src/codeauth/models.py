"""Typed, immutable records shared by the transport, cache and client."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Literal

from codeauth.errors import CONNECTION_ERROR, NO_ERROR

SocialType = Literal["google", "microsoft", "apple"]
InvalidateType = Literal["only_this", "all", "all_but_this"]

# Result envelope returned by every operation: ``{"error": str, ...}``.
Envelope = dict[str, Any]


@dataclass(frozen=True, slots=True)
class CodeAuthConfig:
    """Connection and cache settings for one client."""

    endpoint: str
    project_id: str
    use_cache: bool = True
    # Seconds the shared cache window stays valid
    cache_duration: int = 30
    # ``None`` keeps the HTTP library default
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.cache_duration < 0:
            raise ValueError("cache_duration must be >= 0")

    @property
    def base_url(self) -> str:
        return f"https://{self.endpoint.rstrip('/')}"


class TransportFailure(enum.Enum):
    """Ways a request can fail before a usable JSON object is obtained."""

    CONNECTION = "connection"
    MALFORMED_BODY = "malformed_body"


@dataclass(frozen=True, slots=True)
class TransportResult:
    """Outcome of a single POST: either a decoded payload or a failure kind."""

    status_code: int | None = None
    payload: dict[str, Any] | None = None
    failure: TransportFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and self.status_code == 200

    def to_envelope(self) -> Envelope:
        """Normalise into the envelope handed back to callers.

        * any failure            -> exactly ``{"error": "connection_error"}``
        * HTTP 200               -> payload with ``error`` forced to ``no_error``
        * other statuses         -> payload exactly as the server sent it
        """
        if self.failure is not None or self.payload is None:
            return {"error": CONNECTION_ERROR}
        envelope = dict(self.payload)
        if self.ok:
            envelope["error"] = NO_ERROR
        return envelope
