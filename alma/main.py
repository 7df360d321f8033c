import os
import logging
import tempfile
from sys import stdout
from argparse import Namespace
from alma import provision
from alma.args import parse_arguments, parse_rootfs
from alma.lib import utils
from alma.lib.config import AlmaConfig, load_config_file
from alma.mount import MountStack
from alma.storage.device import StorageDevice
from alma.storage.filesystem import Filesystem
from alma.tool import Tool
log = logging.getLogger(__name__)


def check_system():
	if not utils.is_root():
		raise PermissionError("this tool can only run as root")


def remove_mount_dir(mnt: str):
	# rmdir only, never recurse into what may still be a mounted appliance
	boot = os.path.join(mnt, "boot")
	if os.path.isdir(boot): os.rmdir(boot)
	os.rmdir(mnt)


def chroot_session(
	boot: Filesystem,
	root: Filesystem,
	command: list[str],
):
	"""
	Mount root and boot under a temporary folder and run arch-chroot in it
	The folder is only removed once everything was unmounted
	"""
	chroot = Tool.find("arch-chroot")
	mounts = MountStack(Tool.find("mount"), Tool.find("umount"))
	mnt = tempfile.mkdtemp(prefix="alma-")
	try:
		with mounts:
			mounts.mount(root, mnt)
			mounts.mount(boot, os.path.join(mnt, "boot"))
			chroot.execute().arg(mnt).args(command).run()
	finally:
		if len(mounts.mounted) > 0:
			log.error(f"mount points under {mnt} not cleanup, leaving it in place")
		else:
			try: remove_mount_dir(mnt)
			except OSError:
				log.warning(f"failed to remove mount folder {mnt}", exc_info=True)


def cmd_create(args: Namespace, config: AlmaConfig):
	check_system()
	fs_type = parse_rootfs(args.rootfs, config.rootfs)
	device = StorageDevice.resolve(args.path)
	boot, root = provision.provision(device, fs_type, config)
	if args.interactive:
		log.info(f"entering interactive chroot on {device.path()}")
		chroot_session(boot, root, [])


def cmd_chroot(args: Namespace, config: AlmaConfig):
	check_system()
	fs_type = parse_rootfs(args.rootfs, config.rootfs)
	device = StorageDevice.resolve(args.block_device)
	boot, root = provision.existing_filesystems(device, fs_type)
	chroot_session(boot, root, args.command)


def cmd_qemu(args: Namespace, config: AlmaConfig):
	device = StorageDevice.resolve(args.block_device)
	qemu = Tool.find(config.qemu_binary)
	cmd = qemu.execute()
	cmd.args(["-m", config.qemu_memory])
	cmd.args(["-machine", "type=q35,accel=kvm", "-cpu", "host"])
	cmd.args(["-drive", f"file={device.path()},if=virtio,format=raw"])
	cmd.args(args.args)
	cmd.run()


commands = {
	"create": cmd_create,
	"chroot": cmd_chroot,
	"qemu":   cmd_qemu,
}


def main(argv: list[str] = None):
	logging.basicConfig(stream=stdout, level=logging.INFO)
	args = parse_arguments(argv)

	# debug logging
	if args.verbose:
		logging.root.setLevel(logging.DEBUG)
		log.debug("enabled debug logging")

	config = AlmaConfig()
	if args.config:
		load_config_file(args.config, config)
	commands[args.cmd](args, config)
