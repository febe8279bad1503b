"""Continuation-token pagination helper."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from s3t.core.models import Page

T = TypeVar("T")

logger = logging.getLogger(__name__)


def collect_all(fetch_page: Callable[[str | None], Page[T]]) -> list[T]:
    """
    Drain a paginated listing call into a single list.

    `fetch_page` is called with `None` first, then with each continuation
    token the service hands back, until a page arrives without one. Items are
    returned in exactly the order the pages delivered them.

    Any exception raised by `fetch_page` propagates; items collected from
    earlier pages are discarded.

    Args:
        fetch_page: Callable returning one Page for a continuation token.
                    Filters such as a name prefix are bound in by the caller.

    Returns:
        All items across all pages.
    """
    items: list[T] = []
    token: str | None = None
    pages = 0

    while True:
        page = fetch_page(token)
        pages += 1
        items.extend(page.items)
        if not page.next_token:
            break
        token = page.next_token

    logger.debug("Collected %d item(s) over %d page(s)", len(items), pages)
    return items
