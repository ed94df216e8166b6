"""Tests for the sysfs block queue reader."""

import pytest

from disk_stats.block_queue import BlockQueue
from disk_stats.errors import SourceUnavailableError


@pytest.fixture
def sysfs(tmp_path):
    queue = tmp_path / "nvme0n1" / "queue"
    queue.mkdir(parents=True)
    (queue / "physical_block_size").write_text("4096\n")
    (queue / "logical_block_size").write_text("512\n")
    (queue / "scheduler").write_text("[none] mq-deadline\n")
    return str(tmp_path)


def test_block_sizes(sysfs):
    queue = BlockQueue("nvme0n1", sysfs_base=sysfs)

    assert queue.physical_block_size() == 4096
    assert queue.logical_block_size() == 512


def test_read_param_strips(sysfs):
    assert BlockQueue("nvme0n1", sysfs_base=sysfs).read_param("scheduler") == "[none] mq-deadline"


def test_missing_device(sysfs):
    with pytest.raises(SourceUnavailableError) as excinfo:
        BlockQueue("sdz", sysfs_base=sysfs).physical_block_size()

    assert "sdz" in excinfo.value.path


def test_garbage_value(sysfs, tmp_path):
    (tmp_path / "nvme0n1" / "queue" / "physical_block_size").write_text("n/a\n")

    with pytest.raises(SourceUnavailableError):
        BlockQueue("nvme0n1", sysfs_base=sysfs).physical_block_size()
