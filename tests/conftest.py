"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from gochef.layers.cook.executor import BuildResult

GO_MOD = """module example.com/app

go 1.22

require golang.org/x/sys v0.20.0
"""

GO_SUM = """golang.org/x/sys v0.20.0 h1:Od9JTbYCk261bKm4M/mw7AklTlFYIa0bIp9BgSm1S8Y=
golang.org/x/sys v0.20.0/go.mod h1:/VUhepiaJMQUp4+oa/7Zr1D23ma6VTLIYjOOTFZPUcA=
"""


@pytest.fixture
def go_module(tmp_path: Path) -> Callable[..., Path]:
    """Create a Go module in a temporary directory.

    Returns:
        Function taking a mapping of relative path to file content and
        returning the module root. go.mod and go.sum are written unless
        the mapping provides them.
    """

    def make(files: dict[str, str] | None = None) -> Path:
        contents = {"go.mod": GO_MOD, "go.sum": GO_SUM}
        contents.update(files or {})
        for name, text in contents.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return make


class FakeExecutor:
    """Stands in for BuildExecutor and records what it was asked to build."""

    def __init__(self, success: bool = True, return_code: int = 0) -> None:
        self.success = success
        self.return_code = return_code
        self.calls: list[tuple[Path, str | None]] = []
        self.seen_files: dict[str, str] = {}

    def build(self, cwd: Path, tags: str | None = None) -> BuildResult:
        self.calls.append((cwd, tags))
        self.seen_files = {
            path.name: path.read_text(encoding="utf-8") for path in sorted(cwd.glob("*.go"))
        }
        return BuildResult(
            success=self.success,
            return_code=self.return_code,
            command="go build -o /dev/null .",
            error_message=None if self.success else f"exited with code {self.return_code}",
        )


@pytest.fixture
def fake_executor() -> FakeExecutor:
    """Create a successful fake build executor."""
    return FakeExecutor()


@pytest.fixture
def failing_executor() -> FakeExecutor:
    """Create a fake build executor whose build fails."""
    return FakeExecutor(success=False, return_code=1)
