from __future__ import annotations

"""Step runner.

CONTRACT
- Inputs: ordered steps, executor, dry_run flag, console
- Outputs (required):
  - Every step's message printed, in order, before its action
  - list[StepOutcome] recording which steps were executed
- Invariants:
  - An action runs iff (not dry_run) or step.ignore_dry
  - Steps run strictly one after another
- Failure:
  - The first exception from an action propagates; later steps never run
"""

from dataclasses import dataclass
from typing import Protocol, Sequence

from loguru import logger
from rich.console import Console

from .steps.base import Step


class Executor(Protocol):
    async def execute(self, step: Step) -> None: ...


@dataclass(frozen=True)
class StepOutcome:
    name: str
    message: str
    executed: bool


def should_execute(step: Step, dry_run: bool) -> bool:
    return not dry_run or step.ignore_dry


async def run_steps(
    steps: Sequence[Step],
    executor: Executor,
    *,
    dry_run: bool,
    console: Console,
) -> list[StepOutcome]:
    outcomes: list[StepOutcome] = []
    for step in steps:
        console.print(step.message, markup=False, highlight=False, soft_wrap=True)
        execute = should_execute(step, dry_run)
        if execute:
            await executor.execute(step)
        else:
            logger.debug(f"Dry run: skipped {step.name}")
        outcomes.append(StepOutcome(name=step.name, message=step.message, executed=execute))
    return outcomes
