"""Build executor for running 'go build'.

This module runs the Go toolchain against a synthesized program. Output of
the command is forwarded to this process's stdout/stderr and the compiled
binary is discarded.
"""

import os
import shlex
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gochef.core.logger.logger import get_logger

logger = get_logger(__name__)


@dataclass
class BuildResult:
    """Result of a build execution.

    Attributes:
        success: Whether the build succeeded.
        return_code: Exit code of the build command, -1 if it could not start.
        duration_seconds: Time taken for the build.
        command: The command that was executed.
        error_message: Error message if build failed.
    """

    success: bool
    return_code: int = 0
    duration_seconds: float = 0.0
    command: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "success": self.success,
            "return_code": self.return_code,
            "duration_seconds": self.duration_seconds,
            "command": self.command,
            "error_message": self.error_message,
        }


class BuildExecutor:
    """Runs 'go build' for a directory."""

    def __init__(
        self,
        go_binary: str = "go",
        output_path: str = os.devnull,
    ) -> None:
        """Initialize the build executor.

        Args:
            go_binary: Go command to invoke.
            output_path: Value for 'go build -o'.
        """
        self.go_binary = go_binary
        self.output_path = output_path

    def command(self, tags: str | None = None) -> list[str]:
        """Return the build command line.

        Args:
            tags: Optional value for the -tags flag.
        """
        args = [self.go_binary, "build", "-o", self.output_path]
        if tags:
            args.extend(["-tags", tags])
        # build the package in the working directory
        args.append(".")
        return args

    def build(self, cwd: Path, tags: str | None = None) -> BuildResult:
        """Build the Go package in cwd.

        Args:
            cwd: Directory holding the package.
            tags: Optional build tags.

        Returns:
            BuildResult with execution details.
        """
        args = self.command(tags)
        command = shlex.join(args)
        logger.info(f"Building: {command}")

        start_time = time.monotonic()
        try:
            process = subprocess.run(args, cwd=cwd, check=False)
        except OSError as e:
            return BuildResult(
                success=False,
                return_code=-1,
                duration_seconds=time.monotonic() - start_time,
                command=command,
                error_message=f"could not run '{self.go_binary}': {e}",
            )

        duration = time.monotonic() - start_time
        if process.returncode != 0:
            logger.warning(f"Build failed with code {process.returncode}")
            return BuildResult(
                success=False,
                return_code=process.returncode,
                duration_seconds=duration,
                command=command,
                error_message=f"'{command}' exited with code {process.returncode}",
            )

        logger.info(f"Build completed successfully in {duration:.1f}s")
        return BuildResult(
            success=True,
            return_code=0,
            duration_seconds=duration,
            command=command,
        )
