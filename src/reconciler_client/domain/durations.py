"""Duration strings used by the reconciler's status-change history.

The service speaks Go-style durations (``"40s"``, ``"1h30m"``, ``"250ms"``), both
for the look-back offset in the request path and for the time spent in each
status in the response.
"""

from __future__ import annotations

import re
from datetime import timedelta

_MICROSECONDS_PER_UNIT: dict[str, float] = {
    "ns": 0.001,
    "us": 1.0,
    "µs": 1.0,  # noqa: RUF001
    "μs": 1.0,  # noqa: RUF001
    "ms": 1_000.0,
    "s": 1_000_000.0,
    "m": 60_000_000.0,
    "h": 3_600_000_000.0,
}

# unit alternatives must list ``ms`` before ``m`` and ``s``
_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")  # noqa: RUF001

_US_PER_HOUR = 3_600_000_000
_US_PER_MINUTE = 60_000_000
_US_PER_SECOND = 1_000_000


def parse_duration(value: str) -> timedelta:
    """Parse a Go-style duration such as ``"1h2m3.5s"`` into a ``timedelta``."""

    text = value.strip()
    if not text:
        raise ValueError("Duration must not be empty")

    negative = text[0] == "-"
    if text[0] in "+-":
        text = text[1:]
    if text == "0":
        return timedelta(0)

    total_us = 0.0
    position = 0
    for match in _COMPONENT.finditer(text):
        if match.start() != position:
            break
        total_us += float(match.group(1)) * _MICROSECONDS_PER_UNIT[match.group(2)]
        position = match.end()

    if position == 0 or position != len(text):
        raise ValueError(f"Invalid duration: {value!r}")

    result = timedelta(microseconds=total_us)
    return -result if negative else result


def format_offset(window: timedelta) -> str:
    """Render a look-back window as the compact duration the service expects.

    >>> format_offset(timedelta(hours=1, minutes=30))
    '1h30m'
    """

    total_us = window // timedelta(microseconds=1)
    if total_us <= 0:
        raise ValueError("Look-back window must be positive")

    hours, rest = divmod(total_us, _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    seconds, micros = divmod(rest, _US_PER_SECOND)

    parts: list[str] = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if micros:
        fraction = f"{micros:06d}".rstrip("0")
        parts.append(f"{seconds}.{fraction}s")
    elif seconds:
        parts.append(f"{seconds}s")
    return "".join(parts)


__all__ = ["format_offset", "parse_duration"]
