import yaml
from logging import getLogger
from alma.storage.filesystem import FilesystemType, UnsupportedFilesystemError
log = getLogger(__name__)


class AlmaConfigError(Exception):
	pass


class AlmaConfig:

	"""
	Root filesystem type used when --rootfs is not given
	"""
	rootfs: FilesystemType = FilesystemType.EXT4

	"""
	Formatter program per mount type, e.g. {"ext4": "/usr/bin/mke2fs.ext4"}
	"""
	mkfs: dict[str, str] = {}

	"""
	QEMU binary and guest memory for the qemu command
	"""
	qemu_binary: str = "qemu-system-x86_64"
	qemu_memory: str = "4G"

	def __init__(self):
		self.rootfs = FilesystemType.EXT4
		self.mkfs = {}
		self.qemu_binary = "qemu-system-x86_64"
		self.qemu_memory = "4G"

	def mkfs_program(self, fs_type: FilesystemType) -> str:
		"""
		Formatter program for fs_type
		mkfs_program(FilesystemType.F2FS) = "mkfs.f2fs"
		"""
		name = fs_type.to_mount_type()
		if name in self.mkfs: return self.mkfs[name]
		return f"mkfs.{name}"

	def _load_mkfs(self, value):
		if type(value) is not dict:
			raise AlmaConfigError("bad type for mkfs")
		known = [t.to_mount_type() for t in FilesystemType]
		for key, program in value.items():
			if key not in known:
				raise AlmaConfigError(f"unknown filesystem {key} in mkfs")
			if type(program) is not str or len(program) <= 0:
				raise AlmaConfigError(f"bad program for mkfs.{key}")
			self.mkfs[key] = program

	def _load_qemu(self, value):
		if type(value) is not dict:
			raise AlmaConfigError("bad type for qemu")
		if "binary" in value: self.qemu_binary = str(value["binary"])
		if "memory" in value: self.qemu_memory = str(value["memory"])

	def load(self, loaded: dict):
		"""
		Apply a parsed config document
		"""
		if loaded is None: return
		if type(loaded) is not dict:
			raise AlmaConfigError("config must be a mapping")
		for key, value in loaded.items():
			match key:
				case "rootfs":
					if type(value) is not str:
						raise AlmaConfigError("bad type for rootfs")
					try: self.rootfs = FilesystemType.parse(value)
					except UnsupportedFilesystemError as e:
						raise AlmaConfigError(f"bad rootfs: {e}") from e
				case "mkfs": self._load_mkfs(value)
				case "qemu": self._load_qemu(value)
				case _: log.warning(f"ignoring unknown config key {key}")


def load_config_file(path: str, config: AlmaConfig = None) -> AlmaConfig:
	"""
	Load one yaml config
	"""
	if config is None: config = AlmaConfig()
	log.debug(f"try to open config {path}")
	try:
		with open(path, "r") as f:
			loaded = yaml.safe_load(f)
	except yaml.YAMLError as e:
		log.error(f"failed to load config {path}")
		raise AlmaConfigError(f"bad yaml in {path}: {e}") from e
	config.load(loaded)
	log.info(f"loaded config {path}")
	return config
