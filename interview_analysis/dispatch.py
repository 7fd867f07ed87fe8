from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from interview_analysis.errors import ExternalCallFailure, MalformedResponse

logger = logging.getLogger("interview_analysis.dispatch")


PrimaryFn = Callable[..., Awaitable[Any]]
FallbackFn = Callable[..., Any]


@dataclass
class FallbackStep:
    """
    One analysis step with a generative primary and a deterministic fallback.

    The primary is awaited; any failure it raises is logged and the
    fallback is computed from the same arguments instead. The fallback
    must be pure and must not raise.
    """

    name: str
    primary_fn: PrimaryFn
    fallback_fn: FallbackFn

    async def run(self, *args, **kwargs):
        try:
            return await self.primary_fn(*args, **kwargs)
        except ExternalCallFailure as exc:
            logger.warning("%s: external call failed, using fallback | err=%s", self.name, exc)
        except MalformedResponse as exc:
            logger.warning(
                "%s: malformed response, using fallback | err=%s raw_len=%s",
                self.name,
                exc,
                len(exc.raw or ""),
            )
        except Exception as exc:
            logger.exception("%s: unexpected failure, using fallback | err=%s", self.name, exc)
        return self.fallback_fn(*args, **kwargs)
