from argparse import ArgumentParser, Namespace, REMAINDER
from logging import getLogger
from alma.storage.filesystem import FilesystemType, UnsupportedFilesystemError
log = getLogger(__name__)


def parse_rootfs(value: str | None, default: FilesystemType) -> FilesystemType:
	"""
	Resolve --rootfs, fallback to ext4 when the input was not understood
	parse_rootfs(None, FilesystemType.F2FS) = FilesystemType.F2FS
	parse_rootfs("btrfs", FilesystemType.F2FS) = FilesystemType.EXT4
	"""
	if value is None: return default
	try:
		return FilesystemType.parse(value)
	except UnsupportedFilesystemError as e:
		log.warning(f"{e} using {FilesystemType.EXT4} instead")
		return FilesystemType.EXT4


def build_parser() -> ArgumentParser:
	parser = ArgumentParser(
		prog="alma",
		description="Arch Linux Mobile Appliance",
	)
	parser.add_argument("-v", "--verbose", help="Verbose output", default=False, action='store_true')
	parser.add_argument("-c", "--config",  help="Load configuration from a yaml file")
	sub = parser.add_subparsers(dest="cmd", required=True)

	create = sub.add_parser("create", help="Create a new Arch Linux USB")
	create.add_argument("path", help="Partitioned removable block device to provision")
	create.add_argument("-i", "--interactive", help="Enter interactive chroot before unmounting the drive", default=False, action='store_true')
	create.add_argument(
		"-f", "--rootfs",
		help="Filesystem for the new root filesystem, 'ext4' or 'f2fs' (case insensitive). "
		"Falls back to 'ext4' when the value was not understood",
	)

	chroot = sub.add_parser("chroot", help="Chroot into exiting Live USB")
	chroot.add_argument("block_device", help="Path starting with /dev/disk/by-id for the USB drive")
	chroot.add_argument(
		"-f", "--rootfs",
		help="Filesystem of the root partition if the appliance was not created with 'ext4'",
	)
	chroot.add_argument("command", nargs=REMAINDER, help="Optional command to run, options for alma must come before block_device")

	qemu = sub.add_parser("qemu", help="Boot the USB with Qemu")
	qemu.add_argument("block_device", help="Path starting with /dev/disk/by-id for the USB drive")
	qemu.add_argument("args", nargs=REMAINDER, help="Arguments to pass to qemu, everything after block_device is passed through")
	return parser


def parse_arguments(argv: list[str] = None) -> Namespace:
	return build_parser().parse_args(argv)
