"""Process-wide entry point: ``initialize()`` once, then call operations.

The module keeps a single default :class:`~codeauth.client.CodeAuthClient`.
``initialize`` may succeed only once per process; every module-level
operation checks for it before touching the cache or the network.

Code that needs several projects, or explicit lifetimes, should construct
``CodeAuthClient`` instances directly instead.
"""

from __future__ import annotations

import logging
import threading
from typing import Final

from codeauth.client import CodeAuthClient
from codeauth.clock import Clock, default_clock
from codeauth.environment import DEFAULT_PREFIX, config_from_env
from codeauth.errors import AlreadyInitializedError, NotInitializedError
from codeauth.models import CodeAuthConfig, Envelope, InvalidateType, SocialType
from codeauth.transport import Transport

_LOG = logging.getLogger("codeauth.facade")

# Shorter windows do not absorb enough repeat calls to stay under rate limits.
MIN_EFFECTIVE_CACHE_DURATION: Final[int] = 15

_init_lock = threading.Lock()
_default_client: CodeAuthClient | None = None


def _install(
    config: CodeAuthConfig,
    *,
    transport: Transport | None,
    clock: Clock,
) -> CodeAuthClient:
    global _default_client  # noqa: PLW0603
    with _init_lock:
        if _default_client is not None:
            raise AlreadyInitializedError()
        if config.use_cache and config.cache_duration < MIN_EFFECTIVE_CACHE_DURATION:
            _LOG.warning(
                "cache_duration=%ss is below %ss; the cache will do little to "
                "mitigate rate limits",
                config.cache_duration,
                MIN_EFFECTIVE_CACHE_DURATION,
            )
        _default_client = CodeAuthClient(config, transport=transport, clock=clock)
    _LOG.info(
        "CodeAuth initialized for project=%s endpoint=%s (cache=%s, %ss)",
        config.project_id,
        config.endpoint,
        "on" if config.use_cache else "off",
        config.cache_duration,
    )
    return _default_client


def initialize(
    endpoint: str,
    project_id: str,
    use_cache: bool = True,
    cache_duration: int = 30,
    *,
    timeout: float | None = None,
    transport: Transport | None = None,
    clock: Clock = default_clock,
) -> CodeAuthClient:
    """Configure the process-wide client.

    Parameters
    ----------
    endpoint:
        Project endpoint host (found in the project settings), without scheme.
    project_id:
        Project identifier (found in the project settings).
    use_cache:
        Cache session envelopes to speed up ``session_info`` and soften
        rate limits.
    cache_duration:
        Lifetime of the shared cache window, in seconds.
    timeout:
        Optional per-request timeout in seconds.

    Raises
    ------
    AlreadyInitializedError
        If called more than once.
    """
    config = CodeAuthConfig(
        endpoint=endpoint,
        project_id=project_id,
        use_cache=use_cache,
        cache_duration=cache_duration,
        timeout=timeout,
    )
    return _install(config, transport=transport, clock=clock)


def initialize_from_env(
    prefix: str = DEFAULT_PREFIX,
    *,
    transport: Transport | None = None,
    clock: Clock = default_clock,
) -> CodeAuthClient:
    """Like :func:`initialize`, reading ``${PREFIX}*`` environment variables."""
    config = config_from_env(prefix)
    if config is None:
        raise ValueError(f"{prefix}ENDPOINT and {prefix}PROJECT_ID must be set")
    return _install(config, transport=transport, clock=clock)


def get_client() -> CodeAuthClient:
    """Return the initialized client or raise :class:`NotInitializedError`."""
    client = _default_client
    if client is None:
        raise NotInitializedError()
    return client


# --------------------------------------------------------------------------- #
# Module-level operations                                                     #
# --------------------------------------------------------------------------- #
def sign_in_email(email: str) -> Envelope:
    return get_client().sign_in_email(email)


def sign_in_email_verify(email: str, code: str) -> Envelope:
    return get_client().sign_in_email_verify(email, code)


def sign_in_social(social_type: SocialType) -> Envelope:
    return get_client().sign_in_social(social_type)


def sign_in_social_verify(social_type: SocialType, authorization_code: str) -> Envelope:
    return get_client().sign_in_social_verify(social_type, authorization_code)


def session_info(session_token: str) -> Envelope:
    return get_client().session_info(session_token)


def session_refresh(session_token: str) -> Envelope:
    return get_client().session_refresh(session_token)


def session_invalidate(session_token: str, invalidate_type: InvalidateType) -> Envelope:
    return get_client().session_invalidate(session_token, invalidate_type)
