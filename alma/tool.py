import os
from typing import Self
from subprocess import Popen
from logging import getLogger
from alma.lib.utils import find_external, parse_cmd_args
log = getLogger(__name__)


class ToolError(OSError):
	argv: list[str]
	returncode: int

	def __init__(self, argv: list[str], returncode: int):
		name = os.path.basename(argv[0]) if argv else "command"
		super().__init__(f"{name} failed with exit status {returncode}")
		self.argv = argv
		self.returncode = returncode


class ToolCommand:
	"""
	One pending invocation of an external program
	"""
	argv: list[str]

	def __init__(self, program: str):
		self.argv = [program]

	def arg(self, value) -> Self:
		self.argv.append(str(value))
		return self

	def args(self, values: str | list) -> Self:
		for value in parse_cmd_args(values):
			self.arg(value)
		return self

	def run(self) -> None:
		"""
		Run and wait, raise ToolError when exit status is not zero
		"""
		argv = " ".join(self.argv)
		log.debug(f"running external command {argv}")
		proc = Popen(self.argv)
		ret = proc.wait()
		log.debug(f"command exit with {ret}")
		if ret != 0: raise ToolError(self.argv, ret)


class Tool:
	"""
	An external program resolved once and invoked many times
	"""
	path: str

	def __init__(self, path: str):
		self.path = path

	@staticmethod
	def find(name: str) -> "Tool":
		"""
		Tool.find("mkfs.ext4") = Tool("/usr/bin/mkfs.ext4")
		"""
		path = find_external(name)
		if path is None: raise FileNotFoundError(f"{name} not found")
		log.debug(f"found {name} at {path}")
		return Tool(path)

	def execute(self) -> ToolCommand:
		return ToolCommand(self.path)

	def __repr__(self) -> str:
		return f"Tool({self.path!r})"
