import os
import shlex
import shutil
from logging import getLogger
log = getLogger(__name__)


def parse_cmd_args(cmd: str | list[str]) -> list[str]:
	"""
	Parse command line to list
	parse_cmd_args("mkfs.ext4 -F /dev/sdb3") = ["mkfs.ext4", "-F", "/dev/sdb3"]
	parse_cmd_args(["mkfs.ext4", "-F", "/dev/sdb3"]) = ["mkfs.ext4", "-F", "/dev/sdb3"]
	"""
	if type(cmd) is str: return shlex.split(cmd)
	elif type(cmd) is list: return cmd
	else: raise TypeError("unknown type for cmd")


def find_external(name: str) -> str | None:
	"""
	Find a linux executable path
	find_external("mkfs.ext4") = "/usr/bin/mkfs.ext4"
	find_external("mkfs.nothing") = None
	"""
	return shutil.which(name)


def is_root() -> bool:
	return os.getuid() == 0
