"""Clock abstraction used by the session cache window.

The cache never calls ``time`` directly; it receives a ``Clock`` so tests can
move time forward deterministically.

Example
-------
>>> from codeauth.clock import default_clock
>>> isinstance(default_clock(), float)
True
"""

from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Callable returning a timestamp in *seconds*."""

    def __call__(self) -> float: ...


def default_clock() -> float:
    """Return ``time.monotonic()``.

    Only differences between two readings matter to the cache, so a monotonic
    source is used to stay immune to wall-clock jumps.
    """
    return time.monotonic()
