from logging import getLogger
from alma.tool import Tool
from alma.lib.config import AlmaConfig
from alma.storage.device import StorageDevice, Partition
from alma.storage.markers import BlockDevice
from alma.storage.filesystem import Filesystem, FilesystemType
log = getLogger(__name__)

# appliance layout: 1 BIOS boot, 2 EFI system partition, 3 root
BOOT_PARTITION = 2
ROOT_PARTITION = 3


def mkfs_tool(fs_type: FilesystemType, config: AlmaConfig) -> Tool:
	return Tool.find(config.mkfs_program(fs_type))


def format_boot(block: BlockDevice, config: AlmaConfig) -> Filesystem:
	"""
	Format the EFI system partition
	"""
	fs_type = FilesystemType.VFAT
	return Filesystem.format(block, fs_type, mkfs_tool(fs_type, config))


def format_root(
	block: BlockDevice,
	fs_type: FilesystemType,
	config: AlmaConfig,
) -> Filesystem:
	return Filesystem.format(block, fs_type, mkfs_tool(fs_type, config))


def appliance_partitions(device: StorageDevice) -> tuple[Partition, Partition]:
	boot = device.partition(BOOT_PARTITION)
	root = device.partition(ROOT_PARTITION)
	for part in (boot, root):
		if not part.exists():
			raise FileNotFoundError(f"partition {part.path()} not found")
	return boot, root


def provision(
	device: StorageDevice,
	fs_type: FilesystemType,
	config: AlmaConfig,
) -> tuple[Filesystem, Filesystem]:
	"""
	Format boot and root partitions of an already partitioned device
	"""
	boot_part, root_part = appliance_partitions(device)
	log.info(f"provisioning {device.path()} with {fs_type} root filesystem")
	boot = format_boot(boot_part, config)
	root = format_root(root_part, fs_type, config)
	log.info(f"provisioned {device.path()}")
	return boot, root


def existing_filesystems(
	device: StorageDevice,
	fs_type: FilesystemType,
) -> tuple[Filesystem, Filesystem]:
	"""
	Filesystems of a device provisioned earlier, types are assumed
	"""
	boot_part, root_part = appliance_partitions(device)
	boot = Filesystem.from_partition(boot_part, FilesystemType.VFAT)
	root = Filesystem.from_partition(root_part, fs_type)
	return boot, root
