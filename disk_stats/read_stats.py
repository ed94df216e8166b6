"""
Linux disk I/O statistics reader.
Parses /proc/diskstats into per-device counter records.

See https://www.kernel.org/doc/Documentation/iostats.txt for field meanings.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from disk_stats.errors import MalformedRecordError, SourceUnavailableError


logger = logging.getLogger(__name__)

# major, minor and name precede the counters
BASE_FIELDS_NUM = 14
DISCARD_FIELDS_NUM = 18
FLUSH_FIELDS_NUM = 20


@dataclass(frozen=True)
class DeviceStats:
    """
    Cumulative I/O counters for one block device.

    Counters grow from boot (or device attach) and only go backwards on
    wraparound. Discard and flush counters are None on kernels that do not
    report them.
    """

    major: int
    minor: int
    reads_completed: int
    reads_merged: int
    sectors_read: int
    ms_reading: int
    writes_completed: int
    writes_merged: int
    sectors_written: int
    ms_writing: int
    ios_pending: int
    ms_io: int
    ms_weighted_io: int
    discards_completed: Optional[int] = None
    discards_merged: Optional[int] = None
    sectors_discarded: Optional[int] = None
    ms_discarding: Optional[int] = None
    flush_requests: Optional[int] = None
    ms_flushing: Optional[int] = None


StatsSnapshot = Mapping[str, DeviceStats]


def parse_line(line: str) -> Tuple[str, DeviceStats]:
    """
    Parse a single /proc/diskstats line.

    Format (whitespace-separated):
    major minor name reads reads_merged sectors_read ms_reading writes
    writes_merged sectors_written ms_writing ios_in_progress ms_io
    weighted_ms_io [discards discards_merged sectors_discarded ms_discarding
    [flushes ms_flushing]]

    Args:
        line: One line of diskstats text

    Returns:
        Tuple of (device name, DeviceStats)

    Raises:
        MalformedRecordError: If the line is short or a counter is not an integer
    """
    fields = line.split()
    if len(fields) < BASE_FIELDS_NUM:
        raise MalformedRecordError(
            line, f"expected at least {BASE_FIELDS_NUM} fields, got {len(fields)}"
        )

    name = fields[2]
    numeric = fields[:2] + fields[3:]
    for value in numeric:
        # int() would also take signs, underscores and non-ASCII digits
        if not (value.isascii() and value.isdigit()):
            raise MalformedRecordError(line, f"counter {value!r} is not a decimal integer")
    values = [int(value) for value in numeric]

    # Partial extended groups are ignored rather than half-filled
    if len(fields) >= FLUSH_FIELDS_NUM:
        values = values[:FLUSH_FIELDS_NUM - 1]
    elif len(fields) >= DISCARD_FIELDS_NUM:
        values = values[:DISCARD_FIELDS_NUM - 1]
    else:
        values = values[:BASE_FIELDS_NUM - 1]

    return name, DeviceStats(*values)


def parse_diskstats(text: str, strict: bool = False) -> StatsSnapshot:
    """
    Parse the full contents of /proc/diskstats.

    Args:
        text: File contents
        strict: Raise on the first malformed line instead of skipping it

    Returns:
        Read-only mapping of device name to DeviceStats
    """
    devices = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            name, stats = parse_line(line)
        except MalformedRecordError as e:
            if strict:
                raise
            logger.warning("Skipping diskstats line: %s", e)
            continue
        devices[name] = stats
    return MappingProxyType(devices)


class DiskStatsReader:
    """
    Reads and parses /proc/diskstats for all devices.

    The reader keeps no state between calls; every read_snapshot() is an
    independent, consistent view of the counters.
    """

    DISKSTATS_PATH = "/proc/diskstats"

    def __init__(self, path: Optional[str] = None, strict: bool = False):
        """
        Initialize diskstats reader.

        Args:
            path: Statistics file to read (defaults to DISKSTATS_PATH)
            strict: Fail the whole read on a malformed line
        """
        self.path = path or self.DISKSTATS_PATH
        self.strict = strict

    def read_text(self) -> str:
        """Read the whole statistics file in one call."""
        try:
            with open(self.path, 'r') as f:
                return f.read()
        except OSError as e:
            raise SourceUnavailableError(self.path, e) from e

    def read_snapshot(self) -> StatsSnapshot:
        """
        Read current counters for every device.

        Returns:
            Mapping of device name to DeviceStats

        Raises:
            SourceUnavailableError: If the file cannot be read
        """
        return parse_diskstats(self.read_text(), strict=self.strict)


def read_snapshot() -> StatsSnapshot:
    """Read /proc/diskstats immediately, without a sampling window."""
    return DiskStatsReader().read_snapshot()
