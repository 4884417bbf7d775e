"""Tests for the build executor."""

import os
import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from gochef.layers.cook.executor import BuildExecutor, BuildResult


class TestCommand:
    """Tests for BuildExecutor.command."""

    def test_default_command(self) -> None:
        assert BuildExecutor().command() == ["go", "build", "-o", os.devnull, "."]

    def test_with_tags(self) -> None:
        """Test that tags are passed as a single argument."""
        executor = BuildExecutor(go_binary="/usr/local/go/bin/go", output_path="/tmp/out")

        assert executor.command("netgo osusergo") == [
            "/usr/local/go/bin/go",
            "build",
            "-o",
            "/tmp/out",
            "-tags",
            "netgo osusergo",
            ".",
        ]

    def test_empty_tags_omitted(self) -> None:
        assert "-tags" not in BuildExecutor().command("")


class TestBuild:
    """Tests for BuildExecutor.build."""

    def test_successful_build(self, tmp_path: Path) -> None:
        executor = BuildExecutor()

        with patch("gochef.layers.cook.executor.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=0)
            result = executor.build(tmp_path, tags="integration")

        mock_run.assert_called_once_with(
            ["go", "build", "-o", os.devnull, "-tags", "integration", "."],
            cwd=tmp_path,
            check=False,
        )
        assert result.success
        assert result.return_code == 0
        assert result.command == f"go build -o {os.devnull} -tags integration ."

    def test_failed_build(self, tmp_path: Path) -> None:
        """Test that a non-zero exit is reported."""
        with patch("gochef.layers.cook.executor.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(returncode=2)
            result = BuildExecutor().build(tmp_path)

        assert not result.success
        assert result.return_code == 2
        assert "exited with code 2" in result.error_message

    def test_missing_go_binary(self, tmp_path: Path) -> None:
        """Test that a missing toolchain is a failed build, not an exception."""
        with patch(
            "gochef.layers.cook.executor.subprocess.run",
            side_effect=FileNotFoundError(2, "No such file or directory"),
        ):
            result = BuildExecutor(go_binary="no-such-go").build(tmp_path)

        assert not result.success
        assert result.return_code == -1
        assert "no-such-go" in result.error_message

    def test_real_subprocess_failure(self, tmp_path: Path) -> None:
        """Test a real command that exits non-zero."""
        executor = BuildExecutor(go_binary="false")
        executor.command = lambda tags=None: ["false"]  # type: ignore[method-assign]

        result = executor.build(tmp_path)

        assert not result.success
        assert result.return_code == 1


class TestBuildResult:
    def test_to_dict(self) -> None:
        result = BuildResult(success=False, return_code=1, command="go build .")

        assert result.to_dict() == {
            "success": False,
            "return_code": 1,
            "duration_seconds": 0.0,
            "command": "go build .",
            "error_message": None,
        }
