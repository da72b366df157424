"""Exception types and result error codes for the CodeAuth SDK.

Only *local* misuse is raised as an exception (calling an operation before
:func:`codeauth.initialize`, or initializing twice).  Everything that happens
on the wire, transport failures and server-reported problems alike, is
returned to the caller as the ``error`` field of the result envelope.
"""

from __future__ import annotations

from typing import Final

NO_ERROR: Final[str] = "no_error"
CONNECTION_ERROR: Final[str] = "connection_error"

# Codes documented by the CodeAuth API.  The SDK never interprets them; the
# set exists so callers can branch without hard-coding strings.
SERVER_ERROR_CODES: Final[frozenset[str]] = frozenset(
    {
        "bad_email",
        "bad_code",
        "bad_social_type",
        "bad_authorization_code",
        "bad_session_token",
        "bad_invalidate_type",
        "rate_limit_reached",
        "out_of_refresh",
        "internal_error",
    }
)


class CodeAuthError(RuntimeError):
    """Base class for errors raised locally by the SDK."""

    code: str = "codeauth_error"

    def to_payload(self) -> dict[str, str]:
        """Return a JSON-serialisable payload shaped like a result envelope."""
        return {"error": self.code, "message": str(self)}


class NotInitializedError(CodeAuthError):
    """Raised when an operation runs before ``initialize()``."""

    code = "not_initialized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "CodeAuth has not been initialized.")


class AlreadyInitializedError(CodeAuthError):
    """Raised when ``initialize()`` is called a second time."""

    code = "already_initialized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "CodeAuth has already been initialized.")
