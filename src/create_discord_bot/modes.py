from __future__ import annotations

"""Create-vs-update resolution.

CONTRACT
- Inputs: Target path, prompter (update confirmation only)
- Outputs (required):
  - Mode.CREATE when nothing exists at the target
  - Mode.UPDATE when any filesystem entry exists there
- Invariants:
  - Read-only; never touches the filesystem beyond lstat
  - CREATE never asks for confirmation
- Failure:
  - confirm_update raises UpdateDeclined on a negative answer
"""

import enum
import os
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from .errors import UpdateDeclined

if TYPE_CHECKING:
    from .prompts import Prompter


class Mode(enum.Enum):
    CREATE = "create"
    UPDATE = "update"


def resolve_mode(target: Path) -> Mode:
    # lexists: a dangling symlink still occupies the name.
    mode = Mode.UPDATE if os.path.lexists(target) else Mode.CREATE
    logger.info(f"Resolved {mode.value} mode for {target}")
    return mode


def confirm_update(prompter: Prompter, target: Path) -> None:
    question = f"Directory '{target}' already exists. Do you want to update it?"
    if not prompter.confirm(question):
        logger.debug(f"Update of {target} declined")
        raise UpdateDeclined()
