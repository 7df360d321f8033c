"""Testing configuration."""

import pytest

from alma.storage.markers import BlockDevice
from alma.tool import ToolError


class FakeBlockDevice(BlockDevice):
    """In-memory block device reporting a fixed path."""

    def __init__(self, path: str):
        self._path = path

    def path(self) -> str:
        return self._path


class FakeCommand:
    """Records arguments instead of running a process."""

    def __init__(self, tool: "FakeTool"):
        self.tool = tool
        self.argv = []

    def arg(self, value):
        self.argv.append(str(value))
        return self

    def args(self, values):
        for value in values:
            self.arg(value)
        return self

    def run(self) -> None:
        self.tool.invocations.append(self.argv)
        if self.tool.fail:
            raise ToolError([self.tool.name, *self.argv], 1)


class FakeTool:
    """Tool double, every run() is recorded in invocations."""

    def __init__(self, name: str = "fake", fail: bool = False):
        self.name = name
        self.fail = fail
        self.invocations = []

    def execute(self) -> FakeCommand:
        return FakeCommand(self)


@pytest.fixture()
def device() -> FakeBlockDevice:
    """Return fake device at /dev/sdb1."""
    return FakeBlockDevice("/dev/sdb1")


@pytest.fixture()
def mkfs() -> FakeTool:
    """Return succeeding formatter double."""
    return FakeTool("mkfs")


@pytest.fixture()
def failing_mkfs() -> FakeTool:
    """Return formatter double whose invocation fails."""
    return FakeTool("mkfs", fail=True)


@pytest.fixture()
def tools(monkeypatch) -> dict[str, FakeTool]:
    """Replace Tool.find with fake tools, keyed by requested program name."""
    from alma.tool import Tool

    found = {}

    def find(name: str) -> FakeTool:
        if name not in found:
            found[name] = FakeTool(name)
        return found[name]

    monkeypatch.setattr(Tool, "find", staticmethod(find))
    return found
