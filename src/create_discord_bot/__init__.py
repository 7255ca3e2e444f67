"""create_discord_bot package.

Scaffold a Discord bot project, or refresh the core files of an existing one.

Simple API for scripts:

    import create_discord_bot

    # New project in ./my-bot
    result = create_discord_bot.scaffold("my-bot", token="...")

    # Refresh src/core and src/index.js of an existing project
    result = create_discord_bot.scaffold("my-bot", update=True)
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console

from .config import RunContext, ToolConfig, load_tool_config
from .errors import InstallFailed, ScaffoldError, TemplateError, UnsafePath, UpdateDeclined
from .modes import Mode
from .orchestrator import ScaffoldResult, run_scaffold
from .probe import Identified, Unavailable, probe_token
from .prompts import ScriptedPrompter
from .steps.executor import StepExecutor

__version__ = "0.1.0"


def scaffold(
    name: str,
    *,
    token: str | None = None,
    update: bool = False,
    dry_run: bool = False,
    directory: str | Path | None = None,
    executor: StepExecutor | None = None,
    console: Console | None = None,
) -> ScaffoldResult:
    """Run the scaffolding pipeline without prompting.

    Args:
        name: Project name (also the directory name under ``directory``)
        token: Bot token written to token.json (create mode only)
        update: Answer to "update the existing directory?"
        dry_run: Print the steps, only run the invite link check
        directory: Parent directory (default: current dir)

    Raises:
        ValueError: name fails npm naming rules
        UpdateDeclined: directory exists and update is False
    """
    console = console or Console()
    config = executor.config if executor else load_tool_config()
    executor = executor or StepExecutor(config=config, console=console)
    return asyncio.run(
        run_scaffold(
            config=config,
            prompter=ScriptedPrompter(name=name, token=token, update=update),
            executor=executor,
            console=console,
            base_dir=Path(directory) if directory is not None else None,
            dry_run=dry_run,
        )
    )


__all__ = [
    "scaffold",
    "Identified",
    "InstallFailed",
    "Mode",
    "RunContext",
    "ScaffoldError",
    "ScaffoldResult",
    "StepExecutor",
    "TemplateError",
    "ToolConfig",
    "Unavailable",
    "UnsafePath",
    "UpdateDeclined",
    "load_tool_config",
    "probe_token",
    "run_scaffold",
    "__version__",
]
