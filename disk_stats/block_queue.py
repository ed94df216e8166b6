"""
Block device queue attributes.
Reads /sys/block/<device>/queue/* to find a device's sector sizes.
"""

import os
from typing import Optional

from disk_stats.errors import SourceUnavailableError


class BlockQueue:
    """
    Read-only view of a device's /sys/block queue attributes.

    Useful for picking the sector_size_bytes of a sample on devices whose
    physical block size is not 512 bytes.
    """

    SYSFS_BASE = "/sys/block"

    def __init__(self, device: str = "sda", sysfs_base: Optional[str] = None):
        """
        Args:
            device: Block device name (e.g., 'sda', 'nvme0n1')
            sysfs_base: Root of the block sysfs tree (defaults to SYSFS_BASE)
        """
        self.device = device
        self.device_path = os.path.join(sysfs_base or self.SYSFS_BASE, device)
        self.queue_path = os.path.join(self.device_path, "queue")

    def read_param(self, param_name: str) -> str:
        """
        Read a queue attribute.

        Args:
            param_name: Attribute name (e.g., 'physical_block_size')

        Returns:
            Attribute value, stripped

        Raises:
            SourceUnavailableError: If the attribute cannot be read
        """
        param_path = os.path.join(self.queue_path, param_name)
        try:
            with open(param_path, 'r') as f:
                return f.read().strip()
        except OSError as e:
            raise SourceUnavailableError(param_path, e) from e

    def _read_int(self, param_name: str) -> int:
        """
        Read a queue attribute holding an integer.

        Args:
            param_name: Attribute name

        Returns:
            Attribute value as int

        Raises:
            SourceUnavailableError: If the attribute cannot be read or is not numeric
        """
        value = self.read_param(param_name)
        try:
            return int(value)
        except ValueError as e:
            param_path = os.path.join(self.queue_path, param_name)
            raise SourceUnavailableError(param_path, e) from e

    def physical_block_size(self) -> int:
        """Physical sector size in bytes."""
        return self._read_int('physical_block_size')

    def logical_block_size(self) -> int:
        """Logical sector size in bytes."""
        return self._read_int('logical_block_size')
