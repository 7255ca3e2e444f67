from __future__ import annotations

"""Shell command execution.

CONTRACT
- Inputs: Command (str or argv list), cwd, optional log paths, timeout
- Outputs (required):
  - CmdResult(returncode, stdout_path, stderr_path, elapsed_s)
- Invariants:
  - Child output goes to log files, not the terminal
  - The parent process working directory is never changed
  - timeout_s exceeded -> returncode 124
  - Temporary logs (no path given) are removed after a zero exit and kept
    on failure; caller-supplied paths are never removed
- Failure:
  - Returns CmdResult with the exit code (does NOT raise on non-zero exit)
"""

import os
import subprocess
import tempfile
import time
from dataclasses import dataclass
from pathlib import Path

from loguru import logger


def which(cmd: str) -> str | None:
    for p in os.environ.get("PATH", "").split(os.pathsep):
        candidate = Path(p) / cmd
        if candidate.exists() and os.access(candidate, os.X_OK):
            return str(candidate)
    return None


@dataclass(frozen=True)
class CmdResult:
    cmd: str
    returncode: int
    stdout_path: Path | None
    stderr_path: Path | None
    elapsed_s: float

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _temp_log(prefix: str) -> Path:
    tf = tempfile.NamedTemporaryFile(delete=False, prefix=prefix, suffix=".log")
    tf.close()
    return Path(tf.name)


def run_cmd(
    cmd: str | list[str],
    cwd: Path,
    stdout_path: Path | None = None,
    stderr_path: Path | None = None,
    timeout_s: float | None = None,
) -> CmdResult:
    """Run a command in ``cwd`` and store stdout/stderr to files.

    A str runs through the shell, a list runs without one.
    """
    temp_logs = []
    if stdout_path is None:
        stdout_path = _temp_log("cdb_stdout_")
        temp_logs.append(stdout_path)
    if stderr_path is None:
        stderr_path = _temp_log("cdb_stderr_")
        temp_logs.append(stderr_path)
    stdout_path.parent.mkdir(parents=True, exist_ok=True)
    stderr_path.parent.mkdir(parents=True, exist_ok=True)

    use_shell = isinstance(cmd, str)
    logger.debug(f"Running {cmd!r} in {cwd}")

    start_t = time.time()
    with (
        stdout_path.open("w", encoding="utf-8") as out_f,
        stderr_path.open("w", encoding="utf-8") as err_f,
    ):
        try:
            p = subprocess.run(
                cmd,
                cwd=str(cwd),
                shell=use_shell,
                stdout=out_f,
                stderr=err_f,
                timeout=timeout_s,
                text=True,
            )
            rc = p.returncode
        except subprocess.TimeoutExpired:
            rc = 124
            err_f.write("\nTimeout expired.\n")
        except FileNotFoundError as e:
            # argv form with a missing executable
            rc = 127
            err_f.write(f"\n{e}\n")

    elapsed = time.time() - start_t
    logger.debug(f"{cmd!r} exited with {rc} after {elapsed:.1f}s")
    if rc == 0:
        for log in temp_logs:
            log.unlink(missing_ok=True)
        stdout_path = None if stdout_path in temp_logs else stdout_path
        stderr_path = None if stderr_path in temp_logs else stderr_path
    return CmdResult(
        cmd=cmd if isinstance(cmd, str) else " ".join(cmd),
        returncode=rc,
        stdout_path=stdout_path,
        stderr_path=stderr_path,
        elapsed_s=elapsed,
    )
