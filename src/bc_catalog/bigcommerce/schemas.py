"""
Response shapes for the two BigCommerce endpoints we talk to, plus the small
value types derived from them.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..errors import SchemaError


# ---------- GraphQL scope introspection ----------

class ScopeEdge(BaseModel):
    node: str


class ScopeConnection(BaseModel):
    edges: List[ScopeEdge]


class ScopeClient(BaseModel):
    scopes: ScopeConnection


class ScopeData(BaseModel):
    client: ScopeClient


class ScopeResponse(BaseModel):
    data: ScopeData

    def granted_scopes(self) -> List[str]:
        return [edge.node for edge in self.data.client.scopes.edges]


# ---------- REST v3 catalog listing ----------

class PaginationLinks(BaseModel):
    model_config = ConfigDict(extra="allow")

    next: Optional[str] = None

    @field_validator("next", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # Absent means last page; an explicit null is malformed.
        if value is None:
            raise ValueError("next must be a string when present")
        return value


class Pagination(BaseModel):
    model_config = ConfigDict(extra="allow")

    links: PaginationLinks


class ProductsMeta(BaseModel):
    model_config = ConfigDict(extra="allow")

    pagination: Pagination


class ProductsResponse(BaseModel):
    data: List[Dict[str, Any]]
    meta: ProductsMeta


@dataclass(frozen=True)
class Page:
    items: Tuple[Dict[str, Any], ...]
    next_cursor: Optional[str] = None

    @classmethod
    def from_response(cls, parsed: ProductsResponse) -> "Page":
        # An empty "next" is treated the same as a missing one.
        cursor = parsed.meta.pagination.links.next or None
        return cls(items=tuple(parsed.data), next_cursor=cursor)


# ---------- Rate limit headers ----------

REQUESTS_LEFT_HEADER = "X-Rate-Limit-Requests-Left"
RESET_MS_HEADER = "X-Rate-Limit-Time-Reset-Ms"


def parse_int_header(value: Optional[str]) -> Optional[int]:
    """Parse an integer header value; None when absent or not a number."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class RateLimitSignal:
    requests_remaining: Optional[int]
    reset_delay_ms: Optional[int]

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> "RateLimitSignal":
        return cls(
            requests_remaining=parse_int_header(headers.get(REQUESTS_LEFT_HEADER)),
            reset_delay_ms=parse_int_header(headers.get(RESET_MS_HEADER)),
        )

    @property
    def exhausted(self) -> bool:
        # Unknown budget never throttles.
        return self.requests_remaining is not None and self.requests_remaining < 1


# ---------- parse helpers ----------

def _load_json(body: bytes) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise SchemaError(f"Response body is not valid JSON: {exc}") from exc


def parse_scope_response(body: bytes) -> ScopeResponse:
    try:
        return ScopeResponse.model_validate(_load_json(body))
    except ValidationError as exc:
        raise SchemaError(f"Unexpected scope response: {exc}") from exc


def parse_products_page(body: bytes) -> Page:
    try:
        parsed = ProductsResponse.model_validate(_load_json(body))
    except ValidationError as exc:
        raise SchemaError(f"Unexpected products response: {exc}") from exc
    return Page.from_response(parsed)
