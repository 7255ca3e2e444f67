from __future__ import annotations

"""Exception types.

CONTRACT
- Invariants:
  - Every failure the tool raises on purpose derives from ScaffoldError
  - Filesystem failures are NOT wrapped (OSError family propagates as-is)
"""

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for tool-raised failures."""


class UpdateDeclined(ScaffoldError):
    """The user did not confirm updating an existing directory."""

    def __init__(self, message: str = "Quitting...") -> None:
        super().__init__(message)


class TemplateError(ScaffoldError):
    """Bundled template or its config is missing or malformed."""


class InstallFailed(ScaffoldError):
    def __init__(self, cmd: str, returncode: int, stderr_path: Path | None = None) -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stderr_path = stderr_path
        detail = f" (see {stderr_path})" if stderr_path else ""
        super().__init__(f"`{cmd}` exited with code {returncode}{detail}")


class UnsafePath(ScaffoldError):
    """A project path resolves outside the project root (e.g. through a symlink)."""
