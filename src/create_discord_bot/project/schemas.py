from __future__ import annotations

"""Generated file schemas.

CONTRACT
- Inputs: Pydantic models / raw JSON data
- Outputs:
  - Validated JSON-serializable objects
- Invariants:
  - Defines the shape of package.json, token.json and the Discord
    application response
  - PackageManifest keeps unknown template fields (extra="allow")
- Failure:
  - Raises ValidationError on schema mismatch
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PackageManifest(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    version: str
    description: str = ""
    scripts: dict[str, str] | None = None
    dependencies: dict[str, str] | None = None
    devDependencies: dict[str, str] | None = None


class TokenFile(BaseModel):
    token: str


class ApplicationInfo(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(min_length=1)


def synthesize_manifest(template: dict[str, Any], *, name: str, description: str) -> dict[str, Any]:
    """Clone template manifest fields with name/description overridden.

    Key order follows the template; the overridden keys stay where the
    template has them.
    """
    return {**template, "name": name, "description": description}


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
