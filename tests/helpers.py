from pathlib import Path

from rich.console import Console

from create_discord_bot.probe import Identified
from create_discord_bot.util.shell import CmdResult


class FakeRunner:
    """Stands in for util.shell.run_cmd; records calls instead of running npm."""

    def __init__(self, returncode: int = 0):
        self.returncode = returncode
        self.calls: list[tuple[str, Path]] = []

    def __call__(self, cmd, cwd, **kwargs):
        self.calls.append((cmd, Path(cwd)))
        return CmdResult(
            cmd=cmd,
            returncode=self.returncode,
            stdout_path=Path("stdout.log"),
            stderr_path=Path("stderr.log"),
            elapsed_s=0.0,
        )


class FakeProber:
    def __init__(self, result=None):
        self.result = result or Identified("123456789")
        self.tokens: list[str] = []

    async def __call__(self, token: str):
        self.tokens.append(token)
        return self.result


def output_of(console: Console) -> str:
    return console.file.getvalue()


def snapshot(root: Path) -> dict[str, bytes]:
    """Relative path -> content for every entry under root (dirs map to b"")."""
    out = {}
    for p in sorted(root.rglob("*")):
        out[str(p.relative_to(root))] = p.read_bytes() if p.is_file() else b""
    return out
