"""Test doubles for the sampler's collaborators."""

from disk_stats.read_stats import parse_diskstats


def make_line(name, sectors_read=0, sectors_written=0, major=8, minor=0):
    return f"{major} {minor} {name} 0 0 {sectors_read} 0 0 0 {sectors_written} 0 0 0 0"


class FakeSource:
    """Returns the given snapshots in order, one per read_snapshot() call."""

    def __init__(self, *texts):
        self.snapshots = [parse_diskstats(text) for text in texts]
        self.reads = 0

    def read_snapshot(self):
        snapshot = self.snapshots[min(self.reads, len(self.snapshots) - 1)]
        self.reads += 1
        return snapshot


class FakeClock:
    """Returns the given timestamps in order."""

    def __init__(self, *times):
        self.times = list(times)

    def __call__(self):
        return self.times.pop(0)


class FakeSleep:
    """Records requested delays without suspending."""

    def __init__(self):
        self.calls = []

    async def __call__(self, seconds):
        self.calls.append(seconds)
