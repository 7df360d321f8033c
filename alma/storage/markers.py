from abc import ABC, abstractmethod


class BlockDevice(ABC):
	"""
	Anything a formatting tool can be pointed at
	Implementations only report where the device lives,
	the device itself is never opened, owned or closed here
	"""

	@abstractmethod
	def path(self) -> str: pass

	def __str__(self) -> str:
		return self.path()

	def __repr__(self) -> str:
		return f"{self.__class__.__qualname__}({self.path()!r})"
