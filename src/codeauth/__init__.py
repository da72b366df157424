"""CodeAuth Python SDK.

Thin client for the hosted CodeAuth service: email one-time-code sign-in,
social OAuth2 sign-in and session lifecycle calls, with an optional
time-windowed cache of session information.

Sub-modules
-----------
client
    :class:`CodeAuthClient`, one instance per project.
facade
    Process-wide ``initialize()`` plus module-level operations.
cache
    Shared-window session cache.
transport
    HTTPS/JSON transport built on :pymod:`requests`.
models
    Immutable configuration and transport result records.
errors
    Exception types and result error codes.
environment
    Configuration from ``CODEAUTH_*`` environment variables.
clock
    Test-friendly time abstraction.
log_utils
    Logging helpers that keep credentials out of log records.

All public objects are re-exported here for convenience.
"""

from __future__ import annotations

from .clock import Clock, default_clock  # noqa: F401
from .errors import (  # noqa: F401
    CONNECTION_ERROR,
    NO_ERROR,
    SERVER_ERROR_CODES,
    AlreadyInitializedError,
    CodeAuthError,
    NotInitializedError,
)
from .models import (  # noqa: F401
    CodeAuthConfig,
    Envelope,
    InvalidateType,
    SocialType,
    TransportFailure,
    TransportResult,
)
from .cache import SessionCache  # noqa: F401
from .transport import HttpTransport, Transport  # noqa: F401
from .client import CodeAuthClient  # noqa: F401
from .environment import config_from_env  # noqa: F401
from .facade import (  # noqa: F401
    get_client,
    initialize,
    initialize_from_env,
    session_info,
    session_invalidate,
    session_refresh,
    sign_in_email,
    sign_in_email_verify,
    sign_in_social,
    sign_in_social_verify,
)
from .log_utils import get_codeauth_logger, mask_sensitive  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    # client
    "CodeAuthClient",
    # facade
    "initialize",
    "initialize_from_env",
    "get_client",
    "sign_in_email",
    "sign_in_email_verify",
    "sign_in_social",
    "sign_in_social_verify",
    "session_info",
    "session_refresh",
    "session_invalidate",
    # cache / transport
    "SessionCache",
    "Transport",
    "HttpTransport",
    # models
    "CodeAuthConfig",
    "Envelope",
    "InvalidateType",
    "SocialType",
    "TransportFailure",
    "TransportResult",
    # errors
    "CodeAuthError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "NO_ERROR",
    "CONNECTION_ERROR",
    "SERVER_ERROR_CODES",
    # config
    "config_from_env",
    # clock / logging helpers
    "Clock",
    "default_clock",
    "get_codeauth_logger",
    "mask_sensitive",
]
