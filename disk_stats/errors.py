"""
Error types raised while reading disk statistics and sampling rates.
"""

from typing import Iterable, Optional


class DiskStatsError(Exception):
    """Base class for all disk-stats errors."""


class SourceUnavailableError(DiskStatsError, OSError):
    """A kernel statistics file could not be opened or read."""

    def __init__(self, path: str, reason: Optional[BaseException] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot read statistics source {path}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(message)


class DeviceNotFoundError(DiskStatsError, LookupError):
    """The requested device is not listed in a snapshot."""

    def __init__(self, device: str, available: Iterable[str] = ()):
        self.device = device
        self.available = sorted(available)
        message = f"Device '{device}' not found in diskstats"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class MalformedRecordError(DiskStatsError, ValueError):
    """A diskstats line does not parse into a complete record."""

    def __init__(self, line: str, detail: str):
        self.line = line
        self.detail = detail
        super().__init__(f"Malformed diskstats line {line!r}: {detail}")


class InvalidUnitError(DiskStatsError, ValueError):
    """An output unit outside the supported set was requested."""

    def __init__(self, unit, valid: Iterable[str] = ()):
        self.unit = unit
        self.valid = list(valid)
        super().__init__(
            f"Unknown units {unit!r}, use one of: {', '.join(self.valid)}"
        )
