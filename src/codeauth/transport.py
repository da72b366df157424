"""HTTPS/JSON transport for the CodeAuth API.

Every request is a ``POST https://<endpoint><path>`` carrying a JSON object
that always includes the configured ``project_id``.  The raw exchange is first
captured as a :class:`~codeauth.models.TransportResult` (payload *or* failure
kind) and only then normalised into the envelope callers see, so each failure
path stays visible and testable.

``requests`` exceptions never escape this module.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Protocol, runtime_checkable

import requests

from codeauth.log_utils import get_codeauth_logger
from codeauth.models import CodeAuthConfig, Envelope, TransportFailure, TransportResult


@runtime_checkable
class Transport(Protocol):
    """Anything able to turn ``(path, fields)`` into a result envelope."""

    def call(self, path: str, fields: Mapping[str, Any]) -> Envelope: ...


class HttpTransport(Transport):
    """``requests``-backed implementation of :class:`Transport`."""

    def __init__(
        self,
        config: CodeAuthConfig,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._log = get_codeauth_logger(
            base_logger_name="codeauth.transport", project_id=config.project_id
        )

    def build_url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    def build_body(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        return {"project_id": self._config.project_id, **fields}

    def post(self, path: str, fields: Mapping[str, Any]) -> TransportResult:
        """Send one request and classify the outcome."""
        url = self.build_url(path)
        data = json.dumps(self.build_body(fields)).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(data)),
        }

        try:
            resp = self._session.post(
                url, data=data, headers=headers, timeout=self._config.timeout
            )
        except requests.RequestException as exc:
            self._log.warning("Request to %s failed: %s", path, exc.__class__.__name__)
            return TransportResult(failure=TransportFailure.CONNECTION)

        try:
            payload = resp.json()
        except ValueError:
            self._log.warning("Non-JSON response from %s (HTTP %s)", path, resp.status_code)
            return TransportResult(
                status_code=resp.status_code, failure=TransportFailure.MALFORMED_BODY
            )

        if not isinstance(payload, dict):
            self._log.warning("Response from %s is not a JSON object", path)
            return TransportResult(
                status_code=resp.status_code, failure=TransportFailure.MALFORMED_BODY
            )

        self._log.debug("POST %s -> HTTP %s", path, resp.status_code)
        return TransportResult(status_code=resp.status_code, payload=payload)

    def call(self, path: str, fields: Mapping[str, Any]) -> Envelope:
        return self.post(path, fields).to_envelope()

    # ------------------------------------------------------------------ #
    # Resource handling                                                  #
    # ------------------------------------------------------------------ #
    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
