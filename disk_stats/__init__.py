"""Disk throughput sampling from Linux /proc/diskstats."""

from disk_stats.block_queue import BlockQueue
from disk_stats.errors import (
    DeviceNotFoundError,
    DiskStatsError,
    InvalidUnitError,
    MalformedRecordError,
    SourceUnavailableError,
)
from disk_stats.read_stats import (
    DeviceStats,
    DiskStatsReader,
    parse_diskstats,
    parse_line,
    read_snapshot,
)
from disk_stats.sampler import (
    RateSampler,
    SampleRequest,
    compute_rate,
    sample_read_rate,
    sample_write_rate,
)
from disk_stats.units import UNITS, convert

__all__ = [
    'BlockQueue',
    'DeviceNotFoundError',
    'DeviceStats',
    'DiskStatsError',
    'DiskStatsReader',
    'InvalidUnitError',
    'MalformedRecordError',
    'RateSampler',
    'SampleRequest',
    'SourceUnavailableError',
    'UNITS',
    'compute_rate',
    'convert',
    'parse_diskstats',
    'parse_line',
    'read_snapshot',
    'sample_read_rate',
    'sample_write_rate',
]
