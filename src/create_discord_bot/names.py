from __future__ import annotations

"""Project name validation.

CONTRACT
- Inputs: candidate name (str)
- Outputs:
  - NameCheck(valid, errors, warnings)
- Invariants:
  - Follows npm package naming rules (the generated project is an npm package)
  - valid means "valid for new packages": no errors AND no warnings
  - Pure; same input always yields the same verdict
- Failure:
  - None (violations are reported in NameCheck, never raised)
"""

import re
from dataclasses import dataclass, field
from urllib.parse import quote

MAX_LENGTH = 214

BLACKLIST = ("node_modules", "favicon.ico")

# Node.js core modules; npm warns when a package shadows one of them.
NODE_BUILTINS = frozenset(
    {
        "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
        "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
        "events", "fs", "http", "http2", "https", "inspector", "module", "net",
        "os", "path", "perf_hooks", "process", "punycode", "querystring",
        "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
        "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
        "worker_threads", "zlib",
    }
)

_SCOPED_RE = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")
_SPECIAL_CHARS_RE = re.compile(r"[~'!()*]")


def _url_safe(text: str) -> bool:
    # Same unreserved set as JavaScript's encodeURIComponent.
    return quote(text, safe="!*'()") == text


@dataclass(frozen=True)
class NameCheck:
    name: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def message(self) -> str:
        if self.valid:
            return ""
        return f"Error: {', '.join(self.errors or self.warnings)}."


def validate_name(candidate: str) -> NameCheck:
    errors: list[str] = []
    warnings: list[str] = []

    if not candidate:
        errors.append("name length must be greater than zero")
    if candidate.startswith("."):
        errors.append("name cannot start with a period")
    if candidate.startswith("_"):
        errors.append("name cannot start with an underscore")
    if candidate.strip() != candidate:
        errors.append("name cannot contain leading or trailing spaces")

    for blacklisted in BLACKLIST:
        if candidate.lower() == blacklisted:
            errors.append(f"{blacklisted} is a blacklisted name")

    if candidate.lower() in NODE_BUILTINS:
        warnings.append(f"{candidate.lower()} is a core module name")
    if len(candidate) > MAX_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_LENGTH} characters")
    if candidate.lower() != candidate:
        warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARS_RE.search(candidate.split("/")[-1]):
        warnings.append('name can no longer contain special characters ("~\'!()*")')

    if not _url_safe(candidate):
        m = _SCOPED_RE.match(candidate)
        scoped_ok = bool(m) and m.group(1) is not None
        if scoped_ok:
            scoped_ok = _url_safe(m.group(1)) and _url_safe(m.group(2))
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return NameCheck(name=candidate, errors=errors, warnings=warnings)


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Check a project name")
    parser.add_argument("name", help="Candidate name")
    args = parser.parse_args()

    check = validate_name(args.name)
    if check.valid:
        print(f"{args.name}: OK")
    else:
        print(check.message, file=sys.stderr)
        sys.exit(1)
