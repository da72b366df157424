"""CodeAuthClient – the SDK's public operations.

Each operation follows the same shape::

    cache.ensure_fresh() -> (cache lookup) -> transport.call() -> (cache update)

Inputs are forwarded verbatim; the CodeAuth server is authoritative for
validating emails, codes, tokens and enum values and answers with error codes
(``bad_email``, ``bad_session_token``…) which are passed back unchanged.
Cache updates only happen for envelopes whose ``error`` is ``no_error``.
"""

from __future__ import annotations

import logging
from typing import Any

from codeauth.cache import SessionCache
from codeauth.clock import Clock, default_clock
from codeauth.errors import NO_ERROR
from codeauth.log_utils import get_codeauth_logger, mask_sensitive
from codeauth.models import CodeAuthConfig, Envelope, InvalidateType, SocialType
from codeauth.transport import HttpTransport, Transport

PATH_SIGNIN_EMAIL = "/signin/email"
PATH_SIGNIN_EMAIL_VERIFY = "/signin/emailverify"
PATH_SIGNIN_SOCIAL = "/signin/social"
PATH_SIGNIN_SOCIAL_VERIFY = "/signin/socialverify"
PATH_SESSION_INFO = "/session/info"
PATH_SESSION_REFRESH = "/session/refresh"
PATH_SESSION_INVALIDATE = "/session/invalidate"


def _succeeded(result: Envelope) -> bool:
    return result.get("error") == NO_ERROR


class CodeAuthClient:
    """Client for one CodeAuth project.

    Several clients may live side by side; each owns its configuration,
    cache and transport.
    """

    def __init__(
        self,
        config: CodeAuthConfig,
        *,
        transport: Transport | None = None,
        clock: Clock = default_clock,
    ) -> None:
        self.config = config
        self._owns_transport = transport is None
        self._transport: Transport = transport or HttpTransport(config)
        self.cache = SessionCache(
            config.cache_duration, enabled=config.use_cache, clock=clock
        )

    def _log(self, operation: str) -> logging.LoggerAdapter:
        return get_codeauth_logger(
            base_logger_name="codeauth.client",
            project_id=self.config.project_id,
            operation=operation,
        )

    def _store_new_session(self, result: Envelope) -> None:
        token = result.get("session_token")
        if _succeeded(result) and token:
            self.cache.put(token, result)

    # ------------------------------------------------------------------ #
    # Sign in                                                            #
    # ------------------------------------------------------------------ #
    def sign_in_email(self, email: str) -> Envelope:
        """Start the sign-in/register flow by emailing the user a one-time code."""
        self.cache.ensure_fresh()
        return self._transport.call(PATH_SIGNIN_EMAIL, {"email": email})

    def sign_in_email_verify(self, email: str, code: str) -> Envelope:
        """Exchange the emailed one-time code for a session token.

        Returns ``session_token``, ``email``, ``expiration`` and
        ``refresh_left`` on success; the envelope is cached under the new token.
        """
        self.cache.ensure_fresh()
        result = self._transport.call(
            PATH_SIGNIN_EMAIL_VERIFY, {"email": email, "code": code}
        )
        self._store_new_session(result)
        return result

    def sign_in_social(self, social_type: SocialType) -> Envelope:
        """Return a ``signin_url`` for the given social OAuth2 provider."""
        self.cache.ensure_fresh()
        return self._transport.call(PATH_SIGNIN_SOCIAL, {"social_type": social_type})

    def sign_in_social_verify(
        self, social_type: SocialType, authorization_code: str
    ) -> Envelope:
        """Exchange the provider's authorization code for a session token."""
        self.cache.ensure_fresh()
        result = self._transport.call(
            PATH_SIGNIN_SOCIAL_VERIFY,
            {"social_type": social_type, "authorization_code": authorization_code},
        )
        self._store_new_session(result)
        return result

    # ------------------------------------------------------------------ #
    # Session lifecycle                                                  #
    # ------------------------------------------------------------------ #
    def session_info(self, session_token: str) -> Envelope:
        """Return ``email``, ``expiration`` and ``refresh_left`` for a token.

        Served from the cache when the window is still open and the token is
        known; otherwise fetched and, on success, cached.
        """
        self.cache.ensure_fresh()
        cached = self.cache.get(session_token)
        if cached is not None:
            self._log("session_info").debug(
                "Served session=%s from cache", mask_sensitive(session_token)
            )
            return cached

        result = self._transport.call(
            PATH_SESSION_INFO, {"session_token": session_token}
        )
        if _succeeded(result):
            self.cache.put(session_token, result)
        return result

    def session_refresh(self, session_token: str) -> Envelope:
        """Trade *session_token* for a new one (consumes one ``refresh_left``)."""
        self.cache.ensure_fresh()
        result = self._transport.call(
            PATH_SESSION_REFRESH, {"session_token": session_token}
        )
        new_token = result.get("session_token")
        if _succeeded(result) and new_token:
            self.cache.replace(session_token, new_token, result)
            self._log("session_refresh").debug(
                "Refreshed session=%s -> %s",
                mask_sensitive(session_token),
                mask_sensitive(new_token),
            )
        return result

    def session_invalidate(
        self, session_token: str, invalidate_type: InvalidateType
    ) -> Envelope:
        """Revoke sessions: ``only_this``, ``all`` or ``all_but_this``."""
        self.cache.ensure_fresh()
        result = self._transport.call(
            PATH_SESSION_INVALIDATE,
            {"session_token": session_token, "invalidate_type": invalidate_type},
        )
        if _succeeded(result) and self.cache.pop(session_token):
            self._log("session_invalidate").debug(
                "Evicted session=%s (%s)", mask_sensitive(session_token), invalidate_type
            )
        return result

    # ------------------------------------------------------------------ #
    # Resource handling                                                  #
    # ------------------------------------------------------------------ #
    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if self._owns_transport and callable(close):
            close()

    def __enter__(self) -> CodeAuthClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
