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
from .catalog import build_steps
from .executor import StepExecutor

__all__ = [
    "CopyBoilerplate",
    "InstallModules",
    "InviteLink",
    "MakeDirectory",
    "Step",
    "StepExecutor",
    "SyncCore",
    "WriteManifest",
    "WriteToken",
    "build_steps",
]
