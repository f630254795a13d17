import json
from typing import Any, Dict, List, Optional, Tuple

import requests
from requests.structures import CaseInsensitiveDict

STORE_HASH = "abc123"
TOKEN = "secret-token"
BASE = f"https://api.bigcommerce.com/stores/{STORE_HASH}"

ENV_KEYS = (
    "BIGCOMMERCE_API_BASE_URL",
    "BIGCOMMERCE_STORE_HASH",
    "BIGCOMMERCE_ACCESS_TOKEN",
    "BC_OUTPUT_PATH",
    "BC_REQUEST_TIMEOUT_SECONDS",
)


def make_response(
    status: int = 200,
    body: Any = None,
    headers: Optional[Dict[str, str]] = None,
    reason: str = "OK",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    if isinstance(body, bytes):
        resp._content = body
    else:
        resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
    resp.headers = CaseInsensitiveDict(headers or {})
    resp.encoding = "utf-8"
    return resp


def scopes_body(*scopes: str) -> Dict[str, Any]:
    return {"data": {"client": {"scopes": {"edges": [{"node": s} for s in scopes]}}}}


def products_body(items: List[Dict[str, Any]], next_link: Optional[str] = None) -> Dict[str, Any]:
    links: Dict[str, Any] = {"current": "?page=1"}
    if next_link is not None:
        links["next"] = next_link
    return {"data": items, "meta": {"pagination": {"total": 0, "links": links}}}


class FakeSession:
    """Stands in for requests.Session; replays queued responses in order."""

    def __init__(self, responses=None) -> None:
        self.headers = CaseInsensitiveDict()
        self.responses = list(responses or [])
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []
        self.closed = False

    def queue(self, *responses) -> "FakeSession":
        self.responses.extend(responses)
        return self

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append((method, url, kwargs))
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        resp.url = url
        return resp

    def close(self) -> None:
        self.closed = True

    @property
    def urls(self) -> List[str]:
        return [url for _, url, _ in self.calls]
