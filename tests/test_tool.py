"""Unit tests for running external tools."""

import pytest

from alma.tool import Tool, ToolCommand, ToolError


def test_find_missing() -> None:
    """Test unknown program raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        Tool.find("alma-no-such-program")


def test_run_success() -> None:
    """Test zero exit status returns normally."""
    assert Tool.find("true").execute().arg("-x").run() is None


def test_run_failure() -> None:
    """Test non-zero exit status raises ToolError."""
    with pytest.raises(ToolError) as exc:
        Tool.find("false").execute().run()
    assert exc.value.returncode == 1
    assert "false failed with exit status 1" in str(exc.value)
    assert isinstance(exc.value, OSError)


def test_command_arguments() -> None:
    """Test arguments are appended in order and converted to strings."""
    cmd = Tool("/usr/bin/mkfs.ext4").execute()
    cmd.args(["-F"]).arg(3).args("-L root")
    assert cmd.argv == ["/usr/bin/mkfs.ext4", "-F", "3", "-L", "root"]


def test_execute_returns_fresh_command() -> None:
    """Test each execute() starts from the bare program."""
    tool = Tool("/bin/mount")
    tool.execute().arg("-a")
    assert tool.execute().argv == ["/bin/mount"]
    assert isinstance(tool.execute(), ToolCommand)
