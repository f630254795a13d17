import logging
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from tqdm import tqdm

from ..bigcommerce.client import BigCommerceClient, Credential
from ..bigcommerce.fetcher import ProductFetcher
from ..bigcommerce.scopes import REQUIRED_SCOPES, ScopeValidator
from ..config import DEFAULT_API_BASE_URL
from .output import write_products

logger = logging.getLogger(__name__)


class Coordinator:
    def __init__(self,
                 store_hash: str,
                 access_token: str,
                 url: str = DEFAULT_API_BASE_URL,
                 output_path: Path = Path("products.json"),
                 timeout: float = 30,
                 client: Optional[BigCommerceClient] = None,
                 sleep: Callable[[float], None] = time.sleep) -> None:

        credential = Credential(store_hash=store_hash, access_token=access_token)
        self._client = client or BigCommerceClient(credential, base_url=url, timeout=timeout)
        self._validator = ScopeValidator(self._client)
        self._fetcher = ProductFetcher(self._client, sleep=sleep)
        self._output_path = output_path

    def fetch_products(self) -> List[Dict[str, Any]]:
        pages = tqdm(
            self._fetcher.iter_pages(),
            desc="Products",
            unit="page",
            disable=not sys.stderr.isatty(),
        )
        try:
            return self._fetcher.fetch_all(pages)
        finally:
            pages.close()

    def run(self) -> Path:
        """
        Validate the token's scopes, fetch every product and write them out.
        Nothing is written unless the whole walk succeeds.
        """
        try:
            logger.info("Checking access token scopes…")
            self._validator.validate(REQUIRED_SCOPES)

            logger.info("Fetching all products from %s…", self._client.store_url)
            products = self.fetch_products()

            return write_products(products, self._output_path)
        finally:
            self._client.close()
