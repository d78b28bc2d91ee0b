"""Best-Effort Calls — error boundary for side effects that must never fail a request.

Invariants:
    - Any Exception raised by the awaited operation is logged and discarded
    - asyncio.CancelledError is re-raised (it is a BaseException, never caught here)
    - No retry, no backoff: one attempt per call site

Design Decisions:
    - Awaitable in, bool out: call sites stay one line and can ignore the result
    - Typed ChecklistError logged at WARNING with its code; anything else also at
      WARNING but with traceback, since an unexpected failure type is worth seeing
"""

import logging
from typing import Any, Awaitable

from checklist.core.errors import ChecklistError

logger = logging.getLogger(__name__)


async def run_best_effort(
    operation: str, call: Awaitable[Any], **log_context: Any,
) -> bool:
    """Await call; on failure log under `operation` and return False."""
    try:
        await call
        return True
    except ChecklistError as e:
        logger.warning("Best-effort %s failed: %s", operation, e.message,
            extra={"operation": operation, "error_code": e.code, **log_context})
    except Exception as e:
        logger.warning("Best-effort %s failed: %s", operation, e,
            extra={"operation": operation, **log_context}, exc_info=True)
    return False
