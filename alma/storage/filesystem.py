from enum import Enum
from logging import getLogger
from alma.tool import Tool
from alma.storage.markers import BlockDevice
log = getLogger(__name__)


class UnsupportedFilesystemError(ValueError):
	input: str

	def __init__(self, input: str):
		super().__init__(f"{input} is not supported or was not understood.")
		self.input = input


class FormatFailedError(RuntimeError):
	cause: Exception

	def __init__(self, cause: Exception):
		super().__init__(f"Error formatting filesystem: {cause}")
		self.cause = cause


class FilesystemType(Enum):
	EXT4 = "ext4"
	VFAT = "vfat"
	F2FS = "f2fs"

	def to_mount_type(self) -> str:
		"""
		Filesystem name as understood by mount -t
		FilesystemType.VFAT.to_mount_type() = "vfat"
		"""
		match self:
			case FilesystemType.EXT4: return "ext4"
			case FilesystemType.VFAT: return "vfat"
			case FilesystemType.F2FS: return "f2fs"
		raise AssertionError(f"no mount type for {self}")

	def format_flags(self) -> list[str]:
		"""
		Arguments passed to mkfs before the device path
		"""
		match self:
			case FilesystemType.EXT4: return ["-F"]
			case FilesystemType.VFAT: return ["-F32"]
			case FilesystemType.F2FS: return ["-f"]
		raise AssertionError(f"no format flags for {self}")

	@staticmethod
	def parse(value: str) -> "FilesystemType":
		"""
		Parse user input, only root filesystem types are accepted
		FilesystemType.parse(" EXT4 ") = FilesystemType.EXT4
		FilesystemType.parse("vfat") raises UnsupportedFilesystemError
		"""
		clean = value.strip().lower()
		match clean:
			case "ext4": return FilesystemType.EXT4
			case "f2fs": return FilesystemType.F2FS
			case _: raise UnsupportedFilesystemError(clean)

	def __str__(self) -> str:
		return self.to_mount_type()


class Filesystem:
	"""
	A filesystem of a known type living on a block device
	The block device is borrowed and must stay valid while this value is used
	"""
	_fs_type: FilesystemType
	_block: BlockDevice

	def __init__(self, block: BlockDevice, fs_type: FilesystemType):
		self._block = block
		self._fs_type = fs_type

	@classmethod
	def format(
		cls,
		block: BlockDevice,
		fs_type: FilesystemType,
		mkfs: Tool,
	) -> "Filesystem":
		"""
		Write a new empty filesystem to block with mkfs
		mkfs is the formatter program, only its arguments are chosen here
		"""
		command = mkfs.execute()
		command.args(fs_type.format_flags())
		command.arg(block.path())
		log.info(f"formatting {block.path()} as {fs_type}")
		try:
			command.run()
		except OSError as e:
			log.error(f"failed to format {block.path()} as {fs_type}")
			raise FormatFailedError(e) from e
		return cls(block, fs_type)

	@classmethod
	def from_partition(
		cls,
		block: BlockDevice,
		fs_type: FilesystemType,
	) -> "Filesystem":
		"""
		Assume block already holds a filesystem of fs_type, nothing is checked
		"""
		return cls(block, fs_type)

	def block(self) -> BlockDevice:
		return self._block

	def fs_type(self) -> FilesystemType:
		return self._fs_type

	def __repr__(self) -> str:
		return f"Filesystem({self._block.path()!r}, {self._fs_type})"
