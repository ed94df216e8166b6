"""
Disk throughput sampler.
Takes two diskstats snapshots a sampling window apart and derives the
read or write rate of one device.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, fields, replace
from typing import Any, Awaitable, Callable, Mapping, Union

from disk_stats.errors import DeviceNotFoundError
from disk_stats.read_stats import DeviceStats, DiskStatsReader, StatsSnapshot
from disk_stats.units import convert, validate_unit


logger = logging.getLogger(__name__)

DEFAULT_DEVICE = "sda"
# Get the real value with `cat /sys/block/sda/queue/physical_block_size`
DEFAULT_SECTOR_SIZE_BYTES = 512
DEFAULT_SAMPLE_MS = 1000
DEFAULT_UNITS = "bytes"


@dataclass(frozen=True)
class SampleRequest:
    """
    Configuration for one rate measurement.

    Attributes:
        device: Block device name as listed in /proc/diskstats
        sector_size_bytes: Bytes per sector counted by the kernel
        sample_ms: Sampling window in milliseconds
        units: Output unit ('bytes', 'KiB', 'MiB' or 'GiB')
    """

    device: str = DEFAULT_DEVICE
    sector_size_bytes: int = DEFAULT_SECTOR_SIZE_BYTES
    sample_ms: float = DEFAULT_SAMPLE_MS
    units: str = DEFAULT_UNITS

    def __post_init__(self):
        if self.sector_size_bytes <= 0:
            raise ValueError(
                f"sector_size_bytes must be positive, got {self.sector_size_bytes}"
            )
        if self.sample_ms < 0:
            raise ValueError(f"sample_ms must not be negative, got {self.sample_ms}")
        validate_unit(self.units)

    @classmethod
    def from_options(
        cls,
        options: Union["SampleRequest", Mapping[str, Any], None] = None,
        **kwargs,
    ) -> "SampleRequest":
        """
        Build a request from a mapping and/or keyword options.

        Unset or empty values fall back to the defaults. The caller's
        mapping is never modified.

        Args:
            options: Existing request, mapping of option names, or None
            **kwargs: Options overriding those in `options`

        Returns:
            Resolved SampleRequest
        """
        if isinstance(options, cls) and not kwargs:
            return options

        merged = {}
        if options is not None and not isinstance(options, cls):
            merged.update(options)
        merged.update(kwargs)

        known = {f.name for f in fields(cls)}
        unknown = set(merged) - known
        if unknown:
            raise TypeError(f"Unknown sample options: {', '.join(sorted(unknown))}")

        # Fields already set on a SampleRequest are kept as they are
        given = {name: value for name, value in merged.items() if value}
        if isinstance(options, cls):
            return replace(options, **given)
        return cls(**given)


def compute_rate(delta_sectors: int, sector_size_bytes: int, elapsed_seconds: float) -> float:
    """
    Convert a sector counter delta over a time window into bytes/sec.

    Args:
        delta_sectors: Difference between two sector counters
        sector_size_bytes: Bytes per sector
        elapsed_seconds: Length of the window

    Returns:
        Rate in bytes per second
    """
    total_bytes = delta_sectors * sector_size_bytes
    if elapsed_seconds <= 0:
        if total_bytes == 0:
            return 0.0
        raise ValueError(f"Elapsed time must be positive, got {elapsed_seconds}")
    return total_bytes / elapsed_seconds


def _lookup(snapshot: StatsSnapshot, device: str) -> DeviceStats:
    try:
        return snapshot[device]
    except KeyError:
        raise DeviceNotFoundError(device, snapshot.keys()) from None


class RateSampler:
    """
    Measures per-device disk throughput over a single sampling window.

    A sampler holds only its collaborators, so one instance can serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        source=None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """
        Args:
            source: Object with a read_snapshot() method (defaults to DiskStatsReader)
            clock: Monotonic clock returning seconds
            sleep: Coroutine function suspending for a number of seconds
        """
        self.source = source if source is not None else DiskStatsReader()
        self.clock = clock
        self.sleep = sleep

    async def _sample(self, request: SampleRequest, counter: str) -> float:
        first = _lookup(self.source.read_snapshot(), request.device)
        start = self.clock()

        await self.sleep(request.sample_ms / 1000)

        second = _lookup(self.source.read_snapshot(), request.device)
        elapsed = self.clock() - start

        delta = getattr(second, counter) - getattr(first, counter)
        rate = compute_rate(delta, request.sector_size_bytes, elapsed)
        logger.debug(
            "%s %s: delta=%d sectors over %.6fs -> %.2f bytes/s",
            request.device, counter, delta, elapsed, rate,
        )
        return convert(rate, request.units)

    async def sample_read_rate(
        self,
        request: Union[SampleRequest, Mapping[str, Any], None] = None,
        **kwargs,
    ) -> float:
        """
        Sample the read throughput of a device.

        Args:
            request: SampleRequest or mapping of options (defaults applied)
            **kwargs: Individual options (device, sector_size_bytes, sample_ms, units)

        Returns:
            Read rate in the requested units per second

        Raises:
            DeviceNotFoundError: If the device is missing from either snapshot
            SourceUnavailableError: If diskstats cannot be read
        """
        return await self._sample(SampleRequest.from_options(request, **kwargs), 'sectors_read')

    async def sample_write_rate(
        self,
        request: Union[SampleRequest, Mapping[str, Any], None] = None,
        **kwargs,
    ) -> float:
        """Sample the write throughput of a device. Same contract as sample_read_rate."""
        return await self._sample(SampleRequest.from_options(request, **kwargs), 'sectors_written')


async def sample_read_rate(options=None, **kwargs) -> float:
    """Read rate of a device from /proc/diskstats."""
    return await RateSampler().sample_read_rate(options, **kwargs)


async def sample_write_rate(options=None, **kwargs) -> float:
    """Write rate of a device from /proc/diskstats."""
    return await RateSampler().sample_write_rate(options, **kwargs)

