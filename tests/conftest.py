"""Shared fixtures for disk-stats tests."""

import pytest


DISKSTATS_TEXT = """\
   8       0 sda 1000 10 2048 500 2000 20 4096 900 0 1200 1400
   8       1 sda1 900 5 1800 450 1900 15 3900 850 1 1100 1300
 259       0 nvme0n1 9007199254740993 0 18446744073709551615 12 7 0 56 3 0 10 15 4 0 64 2 6 1
"""


@pytest.fixture
def diskstats_file(tmp_path):
    path = tmp_path / "diskstats"
    path.write_text(DISKSTATS_TEXT)
    return str(path)
