"""CLI entrypoint.

    create-discord-bot [--dry-run] [--verbose] [--version]

CONTRACT
- Inputs: Command line flags (parsed by Typer), interactive answers
- Outputs (required):
  - Exit code 0 on success
  - Exit code 1 when the update is declined ("Quitting...") or a prompt is aborted
  - Exit code 2 on any other pipeline failure, with a one-line diagnostic
- Invariants:
  - --dry-run previews every step and only runs the invite link check
  - No traceback for expected failures (declined update, I/O, install)
- Failure:
  - Unexpected exceptions are NOT caught (they are bugs)
"""

from __future__ import annotations

import asyncio
import sys

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from .config import TOOL_NAME, get_version, load_tool_config
from .errors import ScaffoldError, UpdateDeclined
from .orchestrator import print_banner, run_scaffold
from .prompts import TyperPrompter
from .steps.executor import StepExecutor

app = typer.Typer(add_completion=False, help="Create Discord bots using a simple widget-based framework.")

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool):
    if value:
        console.print(f"{TOOL_NAME} version: {get_version()}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


_DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    help="Print every step; only the invite link check runs.",
)
_VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    help="Show debug logs.",
)
_VERSION_OPTION = typer.Option(
    False, "--version", callback=_version_callback, is_eager=True, help="Show version."
)


@app.command()
def main(
    dry_run: bool = _DRY_RUN_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    version: bool = _VERSION_OPTION,
) -> None:
    """Create Discord bots using a simple widget-based framework.

    Creates ./NAME from the bundled template, or updates the core files of
    an existing project after confirmation.
    """
    _configure_logging(verbose)
    try:
        config = load_tool_config()
        print_banner(config, console)
        result = asyncio.run(
            run_scaffold(
                config=config,
                prompter=TyperPrompter(console),
                executor=StepExecutor(config=config, console=console),
                console=console,
                dry_run=dry_run,
            )
        )
    except UpdateDeclined as e:
        console.print()
        err_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)
    except (ScaffoldError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=2)
    logger.debug(f"Finished {result.mode.value} of {result.target}")


if __name__ == "__main__":
    app()
