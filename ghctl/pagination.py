"""Concurrent fetch of every page of a paginated GitHub listing.

Page 1 is fetched by the caller (it carries the total page count); pages
2..last_page are fetched on a bounded thread pool and merged on the calling
thread. The first failing page aborts the whole listing: pages that have not
started are cancelled, running ones finish and their results are dropped.
"""

import logging
import threading
from concurrent.futures import FIRST_COMPLETED, ThreadPoolExecutor, wait
from typing import Any, Callable

from .errors import CancelledError, classify_error
from .models import DEFAULT_CONCURRENCY, Page, PageRequest

logger = logging.getLogger(__name__)

FetchPage = Callable[[PageRequest], Page]
Progress = Callable[[int, int], None]


def _raise_classified(exc: BaseException, operation: str, resource: str | None):
    classified = classify_error(exc, operation, resource)
    if classified is exc:
        raise exc
    raise classified from exc


def _merge(pages: dict[int, list], sort_key: Callable[[Any], Any] | None) -> list:
    items = []
    for number in sorted(pages):
        items.extend(pages[number])
    if sort_key is not None:
        items.sort(key=sort_key)
    return items


def fetch_all_pages(
    first: Page,
    fetch_page: FetchPage,
    request: PageRequest,
    *,
    concurrency: int = DEFAULT_CONCURRENCY,
    operation: str = "list",
    resource: str | None = None,
    progress: Progress | None = None,
    cancel: threading.Event | None = None,
    sort_key: Callable[[Any], Any] | None = None,
) -> list:
    """Fetch pages 2..first.last_page and return the items of every page.

    Args:
        first: The already fetched page 1.
        fetch_page: Called once per remaining page with its own PageRequest.
        request: The page-1 request; other pages are derived from it.
        concurrency: Maximum number of in-flight page requests.
        operation: Operation name used when wrapping upstream errors.
        resource: Resource identifier used when wrapping upstream errors.
        progress: Called with (pages_completed, total_pages) on this thread.
        cancel: Shared cancellation signal; set it to stop pending pages.
        sort_key: Sort the merged items by this key. Without it items are
            concatenated in page order.

    Returns:
        All items. Duplicates across pages are kept.

    Raises:
        RateLimitError: Any page hit the rate limit.
        UpstreamAPIError: Any page failed for another upstream reason.
        CancelledError: The cancel event was set or the user interrupted.
    """
    if concurrency < 1:
        raise ValueError(f"concurrency must be at least 1, got {concurrency}")

    cancel = cancel or threading.Event()
    if cancel.is_set():
        raise CancelledError()

    total = max(first.last_page, 1)
    pages: dict[int, list] = {1: list(first.items)}
    if progress:
        progress(1, total)
    if total == 1:
        return _merge(pages, sort_key)

    def run(page_request: PageRequest) -> Page:
        if cancel.is_set():
            raise CancelledError()
        return fetch_page(page_request)

    workers = min(concurrency, total - 1)
    logger.debug("%s: fetching %d more pages with %d workers", operation, total - 1, workers)

    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ghctl-page")
    interrupted = False
    try:
        pending = {executor.submit(run, request.for_page(n)): n for n in range(2, total + 1)}
        while pending:
            done, _ = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                number = pending.pop(future)
                exc = future.exception()
                if exc is not None:
                    logger.debug("%s: page %d failed: %s", operation, number, exc)
                    _raise_classified(exc, operation, resource)
                pages[number] = future.result().items
                if progress:
                    progress(len(pages), total)
    except KeyboardInterrupt:
        interrupted = True
        cancel.set()
        raise CancelledError("interrupted") from None
    except BaseException:
        cancel.set()
        raise
    finally:
        executor.shutdown(wait=not interrupted, cancel_futures=True)

    return _merge(pages, sort_key)


def collect_pages(
    fetch_page: FetchPage,
    request: PageRequest | None = None,
    *,
    operation: str = "list",
    resource: str | None = None,
    **kwargs,
) -> list:
    """Fetch page 1 with ``fetch_page`` and then every remaining page."""
    request = request or PageRequest()
    try:
        first = fetch_page(request)
    except KeyboardInterrupt:
        raise CancelledError("interrupted") from None
    except Exception as e:
        _raise_classified(e, operation, resource)
    return fetch_all_pages(first, fetch_page, request, operation=operation, resource=resource, **kwargs)
