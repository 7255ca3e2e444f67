"""Step kinds.

Each step is a frozen dataclass carrying everything its action needs, so a
step list can be inspected and tested without performing any I/O. The
executor (steps/executor.py) owns the side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class MakeDirectory:
    target: Path
    message: str
    name: str = "make_directory"
    ignore_dry: bool = False


@dataclass(frozen=True)
class CopyBoilerplate:
    target: Path
    source: Path
    ignore_file: str
    ignore_entries: tuple[str, ...]
    message: str = "Creating boilerplate..."
    name: str = "copy_boilerplate"
    ignore_dry: bool = False


@dataclass(frozen=True)
class WriteManifest:
    target: Path
    filename: str
    fields: dict[str, Any] = field(hash=False)
    message: str = "Updating package.json..."
    name: str = "write_manifest"
    ignore_dry: bool = False


@dataclass(frozen=True)
class WriteToken:
    target: Path
    filename: str
    token: str = field(repr=False)
    message: str = "Writing token.json..."
    name: str = "write_token"
    ignore_dry: bool = False


@dataclass(frozen=True)
class InstallModules:
    target: Path
    command: str
    message: str = "Installing modules..."
    name: str = "install_modules"
    ignore_dry: bool = False


@dataclass(frozen=True)
class InviteLink:
    token: str = field(repr=False)
    message: str = "\nGenerating bot invite link..."
    name: str = "invite_link"
    # Only talks to Discord; nothing on disk changes.
    ignore_dry: bool = True


@dataclass(frozen=True)
class SyncCore:
    target: Path
    source: Path
    paths: tuple[str, ...]
    message: str
    name: str = "sync_core"
    ignore_dry: bool = False


Step = (
    MakeDirectory
    | CopyBoilerplate
    | WriteManifest
    | WriteToken
    | InstallModules
    | InviteLink
    | SyncCore
)
