from __future__ import annotations

"""Step catalog.

CONTRACT
- Inputs: Mode, RunContext, ToolConfig
- Outputs (required):
  - UPDATE: [SyncCore]
  - CREATE: [MakeDirectory, CopyBoilerplate, WriteManifest, WriteToken,
             InstallModules, InviteLink]
- Invariants:
  - The list for a mode is fixed; nothing is inserted based on run state
  - Building reads the template manifest but writes nothing
- Failure:
  - Raises TemplateError if the template manifest is missing or invalid
  - Raises ValueError if CREATE is requested without a token
"""

import json
from typing import Any

from pydantic import ValidationError

from ..config import RunContext, ToolConfig
from ..errors import TemplateError
from ..modes import Mode
from ..project.schemas import PackageManifest, synthesize_manifest
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

IGNORE_FILE = ".gitignore"


def read_template_manifest(config: ToolConfig) -> dict[str, Any]:
    path = config.app_dir / config.template.manifest
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        PackageManifest.model_validate(data)
    except FileNotFoundError as e:
        raise TemplateError(f"Template manifest not found: {path}") from e
    except ValidationError as e:
        raise TemplateError(f"Invalid template manifest {path}: {e}") from e
    except ValueError as e:
        raise TemplateError(f"Template manifest is not valid JSON: {path}") from e
    return data


def _update_steps(ctx: RunContext, config: ToolConfig) -> list[Step]:
    return [
        SyncCore(
            target=ctx.target,
            source=config.app_dir,
            paths=config.template.core,
            message=f"Updating core files in '{ctx.name}'...",
        ),
    ]


def _create_steps(ctx: RunContext, config: ToolConfig) -> list[Step]:
    if ctx.token is None:
        raise ValueError("A bot token is required to create a project")
    tpl = config.template
    manifest = synthesize_manifest(
        read_template_manifest(config),
        name=ctx.name,
        description=f"Generated by {config.name_and_version}.",
    )
    return [
        MakeDirectory(target=ctx.target, message=f"Creating directory '{ctx.name}'..."),
        CopyBoilerplate(
            target=ctx.target,
            source=config.app_dir,
            ignore_file=IGNORE_FILE,
            ignore_entries=tpl.ignore,
        ),
        WriteManifest(target=ctx.target, filename=tpl.manifest, fields=manifest),
        WriteToken(target=ctx.target, filename=tpl.token_file, token=ctx.token),
        InstallModules(target=ctx.target, command=tpl.install),
        InviteLink(token=ctx.token),
    ]


def build_steps(mode: Mode, ctx: RunContext, config: ToolConfig) -> list[Step]:
    if mode is Mode.UPDATE:
        return _update_steps(ctx, config)
    if mode is Mode.CREATE:
        return _create_steps(ctx, config)
    raise ValueError(f"Unknown mode: {mode}")
