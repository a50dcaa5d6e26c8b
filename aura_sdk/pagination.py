"""Page-number pagination over list endpoints.

A paginator is an async generator that issues one request per page and
yields each ``Result`` as it arrives, failures included. It stops when

* a request fails (the ``Err`` is the last item yielded), or
* the stop predicate says the collection is exhausted, or
* no usable page size can be determined (runaway guard).

Breaking out of the ``async for`` is enough to cancel; nothing is prefetched.
"""
from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from .result import Result, is_error

logger = logging.getLogger(__name__)

FetchPage = Callable[[dict[str, Any]], Awaitable[Result[Any, Exception]]]
StopPredicate = Callable[[int, int, dict[str, Any]], bool]


def total_exhausted(page: int, limit: int, payload: dict[str, Any]) -> bool:
    """Stop once ``page * limit`` covers the reported total."""
    total = payload.get("total")
    if not isinstance(total, (int, float)) or isinstance(total, bool):
        logger.warning("Page %s has no usable total, stopping pagination", page)
        return True
    return page * limit >= total


def short_page(items_key: str = "items") -> StopPredicate:
    """Stop on a page holding fewer than ``limit`` items."""

    def predicate(page: int, limit: int, payload: dict[str, Any]) -> bool:
        items = payload.get(items_key)
        if not isinstance(items, list):
            return True
        return len(items) < limit

    return predicate


def _effective_limit(requested: Any, payload: dict[str, Any]) -> int | None:
    for candidate in (requested, payload.get("limit")):
        if isinstance(candidate, int) and not isinstance(candidate, bool) and candidate > 0:
            return candidate
    return None


async def paginate(
    fetch_page: FetchPage,
    params: dict[str, Any],
    stop_when: StopPredicate = total_exhausted,
) -> AsyncIterator[Result[Any, Exception]]:
    """Yield one result per page until exhausted or failed.

    Args:
        fetch_page: Coroutine function issuing a single paged request.
        params: Request params. ``page`` (if given) is the first page to
            fetch; ``limit`` (if given) overrides the server-echoed limit.
            The dict itself is never modified.
        stop_when: Termination policy, called as ``(page, limit, payload)``
            with ``payload`` being the body's ``result`` member.
    """
    page = params.get("page") or 1
    requested_limit = params.get("limit")

    while True:
        response = await fetch_page({**params, "page": page})
        yield response

        if is_error(response):
            break

        body = response.value
        payload = body.get("result") if isinstance(body, dict) else None
        if not isinstance(payload, dict):
            logger.warning("Page %s has no result payload, stopping pagination", page)
            break

        limit = _effective_limit(requested_limit, payload)
        if limit is None:
            logger.warning("No usable page limit on page %s, stopping pagination", page)
            break

        if stop_when(page, limit, payload):
            break

        page += 1
