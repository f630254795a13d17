import logging
import time
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from .client import BigCommerceClient, ensure_ok
from .schemas import Page, RateLimitSignal, parse_products_page

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/v3/catalog/products"

# Longest pause a reset header can ask for.
MAX_RESET_DELAY_MS = 60 * 60 * 1000


class ProductFetcher:
    """
    Walks the cursor-linked pages of the v3 catalog products listing.

    Pages are produced lazily by ``iter_pages``; ``fetch_all`` drains them
    into a single list. Every failure aborts the walk.
    """

    def __init__(
        self,
        client: BigCommerceClient,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._sleep = sleep

    def iter_pages(self) -> Iterator[Page]:
        page = self._first_page()
        yield page

        while page.next_cursor:
            page = self._next_page(page.next_cursor)
            yield page

    def fetch_all(self, pages: Optional[Iterable[Page]] = None) -> List[Dict[str, Any]]:
        """Fetch every product, in page order."""
        products: List[Dict[str, Any]] = []
        for page in (pages if pages is not None else self.iter_pages()):
            products.extend(page.items)
        logger.info("Fetched %d products", len(products))
        return products

    # -------------------------------------------------------------------------
    # Pages
    # -------------------------------------------------------------------------

    def _first_page(self) -> Page:
        resp = ensure_ok(self._client.get(PRODUCTS_PATH))
        return parse_products_page(resp.content)

    def _next_page(self, cursor: str) -> Page:
        # The cursor is a relative continuation such as "?page=2&limit=50".
        path = f"{PRODUCTS_PATH}{cursor}"
        logger.info("GET %s", self._client.url(path))
        resp = self._client.get(path)

        signal = RateLimitSignal.from_headers(resp.headers)
        logger.info(
            "Requests left: %s - Reset in %sms",
            signal.requests_remaining, signal.reset_delay_ms,
        )
        self._throttle(signal)

        ensure_ok(resp)
        return parse_products_page(resp.content)

    def _throttle(self, signal: RateLimitSignal) -> None:
        if not signal.exhausted:
            return

        delay_ms = signal.reset_delay_ms
        if delay_ms is None or delay_ms < 0:
            logger.warning(
                "Rate limit reached but reset delay is %r; continuing without waiting",
                delay_ms,
            )
            delay_ms = 0
        elif delay_ms > MAX_RESET_DELAY_MS:
            logger.warning(
                "Reset delay of %dms is above the %dms cap; waiting %dms",
                delay_ms, MAX_RESET_DELAY_MS, MAX_RESET_DELAY_MS,
            )
            delay_ms = MAX_RESET_DELAY_MS

        logger.info("Rate limit reached. Waiting %dms before continuing...", delay_ms)
        self._sleep(delay_ms / 1000)
