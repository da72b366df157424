"""Structured logging helpers for the CodeAuth SDK.

Session tokens, one-time codes and authorization codes are credentials, so
the helpers here only ever attach *non-sensitive* context to log records:

- ``project_id`` – CodeAuth project the client talks to
- ``operation``  – SDK operation being executed (``session_info``…)

Anything token-like that has to appear in a message goes through
:func:`mask_sensitive` first.

Usage
-----
>>> from codeauth.log_utils import get_codeauth_logger, mask_sensitive
>>> log = get_codeauth_logger(project_id="proj1", operation="session_info")
>>> log.debug("cache hit for %s", mask_sensitive("tok-abcdef123"))
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, MutableMapping

_MASK = "****"


def mask_sensitive(value: str | None, keep: int = 6) -> str:
    """Return *value* with everything after the first *keep* chars hidden."""
    if not value:
        return _MASK
    if len(value) <= keep:
        return _MASK
    return f"{value[:keep]}{_MASK}"


class _CodeAuthLoggerAdapter(logging.LoggerAdapter):
    """Inject whitelisted SDK context into log records."""

    extra_keys = ("project_id", "operation")

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        extra_clean: MutableMapping[str, Any] = {}
        for k in self.extra_keys:
            if extra and extra.get(k) is not None:
                extra_clean[k] = extra[k]
        super().__init__(logger, extra_clean)

    def process(self, msg: str, kwargs: MutableMapping[str, Any]):
        if kwargs.get("extra") is None:
            kwargs["extra"] = {}
        # call-site extras win
        for k, v in self.extra.items():
            kwargs["extra"].setdefault(k, v)
        return msg, kwargs


def get_codeauth_logger(
    *,
    base_logger_name: str = "codeauth",
    project_id: str | None = None,
    operation: str | None = None,
) -> logging.LoggerAdapter:
    """Return a LoggerAdapter pre-filled with SDK context."""
    logger = logging.getLogger(base_logger_name)
    return _CodeAuthLoggerAdapter(
        logger,
        {"project_id": project_id, "operation": operation},
    )
