"""Request and connection timeouts held as whole milliseconds."""

from __future__ import annotations

from datetime import timedelta

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)


class TimeoutUnderflowError(ArithmeticError):
    """Raised when a timeout is below the smallest representable value."""


def _to_milliseconds(duration: timedelta | int) -> int:
    if isinstance(duration, timedelta):
        micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
        millis = abs(micros) // 1000
        return millis if micros >= 0 else -millis
    if isinstance(duration, bool) or not isinstance(duration, int):
        raise TypeError(f"timeout must be a timedelta or int milliseconds, not {type(duration).__name__}")
    return duration


class Timeout:
    """A timeout; fractions of a millisecond are truncated toward zero."""

    __slots__ = ("ms",)

    def __init__(self, duration: timedelta | int) -> None:
        self.ms: int = _to_milliseconds(duration)

    def milliseconds(self) -> int:
        """Return the timeout in milliseconds, checked against the signed 64-bit range."""
        if self.ms > _LONG_MAX:
            raise OverflowError(f"Timeout: timeout value overflow: {self.ms} ms.")
        if self.ms < _LONG_MIN:
            raise TimeoutUnderflowError(f"Timeout: timeout value underflow: {self.ms} ms.")
        return self.ms

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Timeout):
            return self.ms == other.ms
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.ms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ms})"


class ConnectTimeout(Timeout):
    """Timeout for the connection phase only."""

    __slots__ = ()