from __future__ import annotations

"""Bot token probe.

CONTRACT
- Inputs: bot token, Discord application endpoint URL, timeout
- Outputs (required):
  - Identified(application_id) when Discord accepts the token
  - Unavailable(reason) otherwise
- Invariants:
  - Never raises (network, HTTP, JSON and schema failures are all contained)
  - One GET request, bounded by timeout_s
  - The token is never logged
- Failure:
  - None; every failure maps to Unavailable
"""

from dataclasses import dataclass

import httpx
from loguru import logger
from pydantic import ValidationError

from .project.schemas import ApplicationInfo


@dataclass(frozen=True)
class Identified:
    application_id: str


@dataclass(frozen=True)
class Unavailable:
    reason: str = ""


ProbeResult = Identified | Unavailable


async def probe_token(
    token: str,
    *,
    url: str,
    timeout_s: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProbeResult:
    if not token or not token.strip():
        return Unavailable("empty token")

    try:
        async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
            logger.debug(f"GET {url}")
            response = await client.get(url, headers={"Authorization": f"Bot {token}"})
            if response.is_error:
                return Unavailable(f"HTTP {response.status_code}")
            info = ApplicationInfo.model_validate(response.json())
    except httpx.TimeoutException:
        return Unavailable(f"timed out after {timeout_s}s")
    except httpx.HTTPError as e:
        return Unavailable(f"request failed: {type(e).__name__}")
    except ValueError as e:
        # json.JSONDecodeError and pydantic's ValidationError are both ValueErrors.
        if isinstance(e, ValidationError):
            return Unavailable("response has no application id")
        return Unavailable("response is not JSON")
    except Exception as e:
        logger.debug(f"Token probe failed unexpectedly: {e!r}")
        return Unavailable(f"unexpected error: {type(e).__name__}")

    logger.debug(f"Token belongs to application {info.id}")
    return Identified(info.id)


if __name__ == "__main__":
    import argparse
    import asyncio
    import sys

    from .config import DiscordConfig

    parser = argparse.ArgumentParser(description="Check a Discord bot token")
    parser.add_argument("--token", required=True, help="Bot token")
    args = parser.parse_args()

    cfg = DiscordConfig()
    result = asyncio.run(probe_token(args.token, url=cfg.application_url, timeout_s=cfg.timeout_s))
    if isinstance(result, Identified):
        print(f"Application id: {result.application_id}")
    else:
        print(f"Unavailable: {result.reason}", file=sys.stderr)
        sys.exit(1)
