"""Step executor.

CONTRACT
- Inputs: Step (one of the kinds in steps/base.py)
- Outputs (required):
  - The side effect of that step kind (directories, files, install, link)
- Invariants:
  - One handler per step kind; unknown kinds are rejected
  - Only InviteLink talks to the network, and it never raises
  - The process working directory is never changed
- Failure:
  - OSError from filesystem handlers propagates unchanged
  - InstallFailed when the install command exits non-zero
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from functools import partial
from typing import Awaitable, Callable

from loguru import logger
from rich.console import Console

from .. import probe as probe_mod
from ..config import ToolConfig
from ..errors import InstallFailed
from ..project.schemas import TokenFile
from ..project.workspace import Workspace
from ..util import shell
from .base import (
    CopyBoilerplate,
    InstallModules,
    InviteLink,
    MakeDirectory,
    Step,
    SyncCore,
    WriteManifest,
    WriteToken,
)

CommandRunner = Callable[..., shell.CmdResult]
Prober = Callable[[str], Awaitable[probe_mod.ProbeResult]]


@dataclass
class StepExecutor:
    config: ToolConfig
    console: Console
    runner: CommandRunner | None = None
    prober: Prober | None = None

    async def execute(self, step: Step) -> None:
        logger.debug(f"Executing {type(step).__name__}")
        if isinstance(step, MakeDirectory):
            Workspace(step.target).create()
        elif isinstance(step, CopyBoilerplate):
            self._copy_boilerplate(step)
        elif isinstance(step, WriteManifest):
            Workspace(step.target).write_json(step.filename, step.fields)
        elif isinstance(step, WriteToken):
            Workspace(step.target).write_json(step.filename, TokenFile(token=step.token).model_dump())
        elif isinstance(step, InstallModules):
            self._install_modules(step)
        elif isinstance(step, InviteLink):
            await self._invite_link(step)
        elif isinstance(step, SyncCore):
            ws = Workspace(step.target)
            for rel in step.paths:
                ws.sync(step.source, rel)
        else:
            raise ValueError(f"Unknown step: {step!r}")

    def _copy_boilerplate(self, step: CopyBoilerplate) -> None:
        ws = Workspace(step.target)
        ws.copy_tree(step.source)
        ws.write_text(step.ignore_file, "".join(f"{entry}\n" for entry in step.ignore_entries))

    def _install_modules(self, step: InstallModules) -> None:
        argv = shlex.split(step.command)
        if argv and shell.which(argv[0]) is None:
            logger.warning(f"{argv[0]} not found on PATH")
        run = self.runner or shell.run_cmd
        res = run(step.command, cwd=step.target)
        if res.returncode != 0:
            raise InstallFailed(step.command, res.returncode, res.stderr_path)
        logger.info(f"Installed modules in {step.target} ({res.elapsed_s:.1f}s)")

    async def _invite_link(self, step: InviteLink) -> None:
        discord = self.config.template.discord
        prober = self.prober or partial(
            probe_mod.probe_token, url=discord.application_url, timeout_s=discord.timeout_s
        )
        result = await prober(step.token)
        if isinstance(result, probe_mod.Identified):
            link = discord.invite_url.format(application_id=result.application_id)
            self.console.print(
                f"Invite your bot: {link}", markup=False, highlight=False, soft_wrap=True
            )
        else:
            logger.warning(f"Bot token check failed: {result.reason}")
            self.console.print(
                "The given bot token was invalid so no link was generated.",
                markup=False,
                highlight=False,
            )
