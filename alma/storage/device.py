import os
from logging import getLogger
from alma.storage.markers import BlockDevice
log = getLogger(__name__)


class Partition(BlockDevice):
	_path: str

	def __init__(self, path: str):
		self._path = str(path)

	def path(self) -> str:
		return self._path

	def exists(self) -> bool:
		return os.path.exists(self._path)


class StorageDevice(BlockDevice):
	"""
	A whole disk, e.g. /dev/sdb or /dev/nvme0n1
	"""
	_path: str

	def __init__(self, path: str):
		self._path = str(path)

	@staticmethod
	def resolve(path: str) -> "StorageDevice":
		"""
		Follow /dev/disk/by-id style links to the kernel device name
		"""
		real = os.path.realpath(path)
		if real != str(path):
			log.debug(f"resolved {path} to {real}")
		return StorageDevice(real)

	def path(self) -> str:
		return self._path

	def partition(self, number: int) -> Partition:
		"""
		Get partition by number
		StorageDevice("/dev/sdb").partition(3) = Partition("/dev/sdb3")
		StorageDevice("/dev/nvme0n1").partition(3) = Partition("/dev/nvme0n1p3")
		"""
		if number < 1: raise ValueError(f"bad partition number {number}")
		# names ending in a digit need a separator
		sep = "p" if self._path[-1:].isdigit() else ""
		return Partition(f"{self._path}{sep}{number}")
