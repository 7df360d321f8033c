"""Unit tests for block devices."""

import os

import pytest

from alma.storage.device import Partition, StorageDevice


@pytest.mark.parametrize(
    "disk, partition",
    [
        ("/dev/sdb", "/dev/sdb3"),
        ("/dev/nvme0n1", "/dev/nvme0n1p3"),
        ("/dev/mmcblk0", "/dev/mmcblk0p3"),
        ("/dev/loop7", "/dev/loop7p3"),
    ],
)
def test_partition_name(disk: str, partition: str) -> None:
    """Test partition naming follows kernel rules."""
    assert StorageDevice(disk).partition(3).path() == partition


def test_partition_number_invalid() -> None:
    """Test partition numbers start at 1."""
    with pytest.raises(ValueError):
        StorageDevice("/dev/sdb").partition(0)


def test_resolve_link(tmp_path) -> None:
    """Test by-id style links resolve to the real device."""
    real = tmp_path / "sdc"
    real.touch()
    link = tmp_path / "usb-Vendor_Disk-0:0"
    os.symlink(real, link)
    assert StorageDevice.resolve(str(link)).path() == str(real)


def test_partition_exists(tmp_path) -> None:
    """Test existence check of a partition node."""
    part = Partition(tmp_path / "sdc1")
    assert not part.exists()
    (tmp_path / "sdc1").touch()
    assert part.exists()
    assert str(part) == str(tmp_path / "sdc1")
