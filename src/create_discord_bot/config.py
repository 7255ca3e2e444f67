from __future__ import annotations

"""Configuration models.

CONTRACT
- Inputs: bundled templates/template.yaml (or an explicit YAML path)
- Outputs (required):
  - Validated TemplateConfig and ToolConfig objects
  - RunContext for a single run
- Invariants:
  - The ignore list always names the token file
  - Core paths are relative and stay inside the project
  - ToolConfig is read-only and built once per process
- Failure:
  - Raises TemplateError on invalid schema or missing template
"""

import importlib.resources
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from . import templates
from .errors import TemplateError

TOOL_NAME = "create-discord-bot"


@dataclass(frozen=True)
class DiscordConfig:
    application_url: str = "https://discord.com/api/oauth2/applications/@me"
    invite_url: str = "https://discord.com/oauth2/authorize?scope=bot&client_id={application_id}"
    timeout_s: float = 10.0


@dataclass(frozen=True)
class TemplateConfig:
    app_dir: str = "app"
    manifest: str = "package.json"
    token_file: str = "token.json"
    ignore: tuple[str, ...] = ("node_modules/", "token.json")
    core: tuple[str, ...] = ("src/core", "src/index.js")
    install: str = "npm install"
    token_placeholder: str = "DISCORD_BOT_TOKEN_PLACEHOLDER"
    start_command: str = "npm start"
    discord: DiscordConfig = field(default_factory=DiscordConfig)


@dataclass(frozen=True)
class ToolConfig:
    name: str
    version: str
    template_root: Path
    template: TemplateConfig

    @property
    def app_dir(self) -> Path:
        return self.template_root / self.template.app_dir

    @property
    def name_and_version(self) -> str:
        return f"{self.name} v{self.version}"


@dataclass(frozen=True)
class RunContext:
    name: str
    target: Path
    token: str | None = None
    dry_run: bool = False


TEMPLATE_SCHEMA = {
    "type": "object",
    "properties": {
        "app_dir": {"type": "string", "minLength": 1},
        "manifest": {"type": "string", "minLength": 1},
        "token_file": {"type": "string", "minLength": 1},
        "ignore": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "core": {"type": "array", "items": {"type": "string", "minLength": 1}},
        "install": {"type": "string", "minLength": 1},
        "token_placeholder": {"type": "string"},
        "start_command": {"type": "string"},
        "discord": {
            "type": "object",
            "properties": {
                "application_url": {"type": "string"},
                "invite_url": {"type": "string"},
                "timeout_s": {"type": "number", "exclusiveMinimum": 0},
            },
        },
    },
    "required": ["app_dir", "manifest", "token_file", "ignore", "core", "install"],
}


def _check_relative(rel: str) -> str:
    p = PurePosixPath(rel)
    if p.is_absolute() or ".." in p.parts:
        raise TemplateError(f"Template path must stay inside the project: {rel}")
    return rel


def parse_template_config(data: dict[str, Any]) -> TemplateConfig:
    import jsonschema  # lazy import

    try:
        jsonschema.validate(instance=data, schema=TEMPLATE_SCHEMA)
    except jsonschema.ValidationError as e:
        raise TemplateError(f"Invalid template.yaml schema: {e.message}") from e

    token_file = _check_relative(str(data["token_file"]))
    ignore = tuple(str(x) for x in data["ignore"])
    if token_file not in ignore:
        raise TemplateError(f"template.yaml must ignore the token file ({token_file})")

    discord_raw = data.get("discord", {}) or {}
    defaults = DiscordConfig()
    return TemplateConfig(
        app_dir=_check_relative(str(data["app_dir"])),
        manifest=_check_relative(str(data["manifest"])),
        token_file=token_file,
        ignore=ignore,
        core=tuple(_check_relative(str(x)) for x in data["core"]),
        install=str(data["install"]),
        token_placeholder=str(data.get("token_placeholder", "DISCORD_BOT_TOKEN_PLACEHOLDER")),
        start_command=str(data.get("start_command", "npm start")),
        discord=DiscordConfig(
            application_url=str(discord_raw.get("application_url", defaults.application_url)),
            invite_url=str(discord_raw.get("invite_url", defaults.invite_url)),
            timeout_s=float(discord_raw.get("timeout_s", defaults.timeout_s)),
        ),
    )


def load_template_config(path: Path) -> TemplateConfig:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except FileNotFoundError as e:
        raise TemplateError(f"Template config not found: {path}") from e
    except yaml.YAMLError as e:
        raise TemplateError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise TemplateError(f"Template config must be a mapping: {path}")
    return parse_template_config(data)


def bundled_template_root() -> Path:
    return Path(str(importlib.resources.files(templates)))


def get_version() -> str:
    try:
        return pkg_version(TOOL_NAME)
    except PackageNotFoundError:
        from . import __version__

        return __version__


def load_tool_config(template_root: Path | None = None) -> ToolConfig:
    root = template_root or bundled_template_root()
    template = load_template_config(root / "template.yaml")
    if not (root / template.app_dir).is_dir():
        raise TemplateError(f"Template directory missing: {root / template.app_dir}")
    return ToolConfig(
        name=TOOL_NAME,
        version=get_version(),
        template_root=root,
        template=template,
    )


if __name__ == "__main__":
    import sys

    try:
        cfg = load_tool_config()
        print(f"{cfg.name_and_version}")
        print(f"Template: {cfg.app_dir}")
        print(f"Core paths: {', '.join(cfg.template.core)}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
