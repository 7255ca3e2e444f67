from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import UnsafePath
from .schemas import dump_json

_COPY_IGNORE = shutil.ignore_patterns("__pycache__", "*.pyc", ".DS_Store")


@dataclass(frozen=True)
class Workspace:
    """Filesystem access rooted at the target project directory.

    CONTRACT
    - Inputs: Project root path
    - Outputs:
      - Files and directories under root
    - Invariants:
      - Enforces path safety (prevents traversal outside root)
      - Copies merge into existing directories and overwrite files
      - Never deletes anything
    - Failure:
      - Raises UnsafePath on unsafe path access
      - OSError (FileExistsError, PermissionError, ...) propagates unchanged
    """
    root: Path

    def create(self) -> None:
        self.root.mkdir(parents=True, exist_ok=False)

    def path(self, *parts: str) -> Path:
        p = self.root.joinpath(*parts)
        base = self.root.resolve(strict=False)
        try:
            p.resolve(strict=False).relative_to(base)
        except ValueError as exc:
            raise UnsafePath(f"Refusing to access path outside project: {p}") from exc
        return p

    def copy_tree(self, src: Path, rel: str = ".") -> Path:
        dest = self.path(rel)
        shutil.copytree(src, dest, dirs_exist_ok=True, ignore=_COPY_IGNORE)
        return dest

    def copy_file(self, src: Path, rel: str) -> Path:
        dest = self.path(rel)
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
        return dest

    def sync(self, src_root: Path, rel: str) -> Path:
        """Copy ``src_root/rel`` to the same relative location in the project."""
        src = src_root / rel
        if src.is_dir():
            return self.copy_tree(src, rel)
        return self.copy_file(src, rel)

    def write_text(self, rel: str, text: str) -> Path:
        p = self.path(rel)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
        return p

    def write_json(self, rel: str, data: Any) -> Path:
        return self.write_text(rel, dump_json(data))

    def read_json(self, rel: str) -> Any:
        return json.loads(self.path(rel).read_text(encoding="utf-8"))
