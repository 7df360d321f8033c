import os
from typing import Self
from logging import getLogger
from alma.tool import Tool
from alma.storage.filesystem import Filesystem
log = getLogger(__name__)


class MountPoint:
	filesystem: Filesystem
	target: str
	options: str | None

	def __init__(self, filesystem: Filesystem, target: str, options: str = None):
		self.filesystem = filesystem
		self.target = str(target)
		self.options = options

	@property
	def source(self) -> str:
		return self.filesystem.block().path()

	def mount(self, tool: Tool) -> Self:
		"""
		Mount now, tool is the mount program
		"""
		if not os.path.exists(self.target):
			os.makedirs(self.target, mode=0o0755)
		fstype = self.filesystem.fs_type().to_mount_type()
		log.debug(
			f"try mount {self.source} "
			f"to {self.target} "
			f"as {fstype} "
			f"with {self.options}"
		)
		cmd = tool.execute().arg("-t").arg(fstype)
		if self.options: cmd.arg("-o").arg(self.options)
		cmd.arg(self.source).arg(self.target)
		cmd.run()
		return self

	def umount(self, tool: Tool) -> Self:
		"""
		UnMount now, tool is the umount program
		"""
		tool.execute().arg(self.target).run()
		log.debug(f"umount {self.target} successfuly")
		return self


class MountStack:
	"""
	Mounts in order, unmounted in reverse order
	"""
	mounted: list[MountPoint]
	mount_tool: Tool
	umount_tool: Tool

	def __init__(self, mount_tool: Tool, umount_tool: Tool):
		self.mounted = []
		self.mount_tool = mount_tool
		self.umount_tool = umount_tool

	def mount(
		self,
		filesystem: Filesystem,
		target: str,
		options: str = None,
	) -> MountPoint:
		mnt = MountPoint(filesystem, target, options)
		mnt.mount(self.mount_tool)
		self.mounted.append(mnt)
		log.info(f"mounted {mnt.source} to {mnt.target}")
		return mnt

	def unmount_all(self):
		"""
		Unmount everything, mounts that failed to unmount stay in mounted
		"""
		error = None
		remaining: list[MountPoint] = []
		for mnt in reversed(self.mounted):
			try:
				mnt.umount(self.umount_tool)
			except OSError as e:
				log.error(f"failed to umount {mnt.target}")
				remaining.insert(0, mnt)
				if error is None: error = e
		self.mounted = remaining
		if error is not None: raise error

	def __enter__(self) -> Self:
		return self

	def __exit__(self, *args):
		self.unmount_all()
