"""Build a :class:`~codeauth.models.CodeAuthConfig` from environment variables."""

import logging
import os
from typing import Final, Tuple

from codeauth.models import CodeAuthConfig

logger = logging.getLogger("codeauth.environment")

DEFAULT_PREFIX: Final[str] = "CODEAUTH_"
DEFAULT_CACHE_DURATION: Final[int] = 30

_TRUTHY: Final[Tuple[str, ...]] = ("true", "1", "yes", "y", "on")


def _truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def _env(prefix: str, key: str) -> str | None:
    value = os.getenv(prefix + key)
    if value is None:
        return None
    return value.strip() or None


def config_from_env(prefix: str = DEFAULT_PREFIX) -> CodeAuthConfig | None:
    """
    Return a config built from ``${PREFIX}*`` variables, or None if incomplete.

    Variables:
      - ``ENDPOINT`` and ``PROJECT_ID`` (required)
      - ``USE_CACHE`` truthy flag, default enabled
      - ``CACHE_DURATION`` integer seconds, default 30
      - ``TIMEOUT`` float seconds, default: HTTP library default

    Raises:
        ValueError: If ``CACHE_DURATION`` or ``TIMEOUT`` is not a number.
    """
    endpoint = _env(prefix, "ENDPOINT")
    project_id = _env(prefix, "PROJECT_ID")
    if not endpoint or not project_id:
        logger.debug(
            "%sENDPOINT / %sPROJECT_ID not set, no config from environment",
            prefix,
            prefix,
        )
        return None

    use_cache_raw = _env(prefix, "USE_CACHE")
    use_cache = True if use_cache_raw is None else _truthy(use_cache_raw)

    duration_raw = _env(prefix, "CACHE_DURATION")
    try:
        cache_duration = int(duration_raw) if duration_raw else DEFAULT_CACHE_DURATION
    except ValueError:
        raise ValueError(
            f"{prefix}CACHE_DURATION must be an integer, got {duration_raw!r}"
        ) from None

    timeout_raw = _env(prefix, "TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else None
    except ValueError:
        raise ValueError(f"{prefix}TIMEOUT must be a number, got {timeout_raw!r}") from None

    return CodeAuthConfig(
        endpoint=endpoint,
        project_id=project_id,
        use_cache=use_cache,
        cache_duration=cache_duration,
        timeout=timeout,
    )
