import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..config import DEFAULT_API_BASE_URL
from ..errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    store_hash: str
    access_token: str

    def __repr__(self) -> str:
        return f"Credential(store_hash={self.store_hash!r}, access_token='****')"


class BigCommerceClient:
    """Client for one store on the BigCommerce API."""

    def __init__(
        self,
        credential: Credential,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.credential = credential
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "accept": "application/json",
                "x-auth-token": credential.access_token,
            }
        )

    @property
    def store_url(self) -> str:
        return f"{self.base_url}/stores/{self.credential.store_hash}"

    def url(self, path: str) -> str:
        return f"{self.store_url}{path}"

    def get(self, path: str) -> requests.Response:
        """GET a store-relative path; the response status is not checked."""
        return self._send("GET", self.url(path))

    def post_json(self, path: str, payload: Dict[str, Any]) -> requests.Response:
        """POST a JSON body to a store-relative path; the status is not checked."""
        return self._send(
            "POST",
            self.url(path),
            json=payload,
            headers={"Content-Type": "application/json"},
        )

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            return self._session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

    def close(self) -> None:
        self._session.close()


def ensure_ok(response: requests.Response) -> requests.Response:
    """Raise UpstreamError unless the response status is exactly 200."""
    if response.status_code != 200:
        raise UpstreamError(response.status_code, response.reason or "", response.url)
    return response
