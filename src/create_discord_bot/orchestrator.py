from __future__ import annotations

"""Orchestrator for a scaffolding run.

CONTRACT
- Inputs: ToolConfig, Prompter, StepExecutor, console, base directory, dry_run
- Outputs (required):
  - ScaffoldResult (mode, target, outcomes)
  - Console output: banner, step messages, final instructions
- Invariants:
  - The name is validated before anything touches the filesystem
  - UPDATE is confirmed before any step is built
  - CREATE asks for the bot token; UPDATE never does
- Failure:
  - UpdateDeclined when the update is not confirmed (zero side effects)
  - Step failures (OSError, ScaffoldError) propagate unchanged
"""

from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from rich.console import Console

from .config import RunContext, ToolConfig
from .modes import Mode, confirm_update, resolve_mode
from .pipeline import StepOutcome, run_steps
from .prompts import Prompter
from .steps.catalog import build_steps, read_template_manifest
from .steps.executor import StepExecutor


@dataclass(frozen=True)
class ScaffoldResult:
    mode: Mode
    name: str
    target: Path
    dry_run: bool
    outcomes: list[StepOutcome]


def print_banner(config: ToolConfig, console: Console) -> None:
    console.print(
        f"This utility will walk you through creating a {config.name} application.\n"
        "\n"
        "Press ENTER to use the default.\n"
        "Press ^C at any time to quit.\n"
        "\n"
        f"{config.name_and_version}",
        markup=False,
        soft_wrap=True,
        highlight=False,
    )


def print_done(config: ToolConfig, name: str, console: Console) -> None:
    console.print()
    console.print(
        f"Done!\n\nStart by running:\n\t$ cd {name}/\n\t$ {config.template.start_command}",
        markup=False,
        soft_wrap=True,
        highlight=False,
    )


async def run_scaffold(
    *,
    config: ToolConfig,
    prompter: Prompter,
    executor: StepExecutor,
    console: Console,
    base_dir: Path | None = None,
    dry_run: bool = False,
) -> ScaffoldResult:
    default_name = str(read_template_manifest(config).get("name", ""))
    name = prompter.ask_name(default_name)
    target = ((base_dir or Path.cwd()) / name).resolve()

    mode = resolve_mode(target)
    token: str | None = None
    if mode is Mode.UPDATE:
        confirm_update(prompter, target)
    else:
        token = prompter.ask_token(config.template.token_placeholder)

    ctx = RunContext(name=name, target=target, token=token, dry_run=dry_run)
    steps = build_steps(mode, ctx, config)
    logger.debug(f"{mode.value}: {[s.name for s in steps]} (dry_run={dry_run})")

    console.print()
    outcomes = await run_steps(steps, executor, dry_run=ctx.dry_run, console=console)
    print_done(config, name, console)
    return ScaffoldResult(mode=mode, name=name, target=target, dry_run=dry_run, outcomes=outcomes)
