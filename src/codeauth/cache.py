"""Time-windowed session cache.

All entries share **one** validity window instead of carrying their own TTL.
The window is checked eagerly: every client operation calls
:meth:`SessionCache.ensure_fresh` first, and if the window has elapsed the
whole mapping is dropped and a new window starts from that moment.  There is
no background timer.

Guarantees
----------
* an entry is never served after the end of the window it was written in;
* expiry is all-or-nothing, individual entries are never aged out;
* a disabled cache is a no-op for every method (``get`` returns ``None``).

Entries are deep-copied on the way in and on the way out, so the caller and
the cache never share a mutable ``dict``.  A single lock guards the window
check and every entry access.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any

from codeauth.clock import Clock, default_clock

_LOG = logging.getLogger("codeauth.cache")


class SessionCache:
    """Mapping of session token -> last successful result envelope."""

    def __init__(
        self,
        duration: float,
        *,
        enabled: bool = True,
        clock: Clock = default_clock,
    ) -> None:
        self._duration = float(duration)
        self._enabled = enabled
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, dict[str, Any]] = {}
        self._window_end = clock() + self._duration

    # ------------------------------------------------------------------ #
    # Introspection                                                      #
    # ------------------------------------------------------------------ #
    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def window_end(self) -> float:
        return self._window_end

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, session_token: object) -> bool:
        with self._lock:
            return session_token in self._entries

    # ------------------------------------------------------------------ #
    # Window handling                                                    #
    # ------------------------------------------------------------------ #
    def _expire_locked(self, now: float) -> None:
        if now >= self._window_end:
            if self._entries:
                _LOG.debug("Cache window elapsed, dropping %d entries", len(self._entries))
            self._entries.clear()
            self._window_end = now + self._duration

    def ensure_fresh(self) -> None:
        """Clear everything and restart the window if it has elapsed."""
        if not self._enabled:
            return
        with self._lock:
            self._expire_locked(self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._window_end = self._clock() + self._duration

    # ------------------------------------------------------------------ #
    # Entry access                                                       #
    # ------------------------------------------------------------------ #
    def get(self, session_token: str) -> dict[str, Any] | None:
        """Return a copy of the cached envelope, or ``None``."""
        if not self._enabled:
            return None
        with self._lock:
            self._expire_locked(self._clock())
            entry = self._entries.get(session_token)
            if entry is None:
                return None
            return copy.deepcopy(entry)

    def put(self, session_token: str, envelope: dict[str, Any]) -> None:
        if not self._enabled:
            return
        with self._lock:
            self._expire_locked(self._clock())
            self._entries[session_token] = copy.deepcopy(envelope)

    def pop(self, session_token: str) -> bool:
        """Evict *session_token*; return whether an entry was present."""
        if not self._enabled:
            return False
        with self._lock:
            return self._entries.pop(session_token, None) is not None

    def replace(self, old_token: str, new_token: str, envelope: dict[str, Any]) -> None:
        """Evict *old_token* and store *envelope* under *new_token* atomically."""
        if not self._enabled:
            return
        with self._lock:
            self._expire_locked(self._clock())
            self._entries.pop(old_token, None)
            self._entries[new_token] = copy.deepcopy(envelope)
