import logging
from typing import Iterable, List, Sequence

from ..errors import MissingScopesError
from .client import BigCommerceClient, ensure_ok
from .schemas import parse_scope_response

logger = logging.getLogger(__name__)

STORE_V2_PRODUCTS = "store_v2_products"

REQUIRED_SCOPES: Sequence[str] = (STORE_V2_PRODUCTS,)

SCOPES_QUERY = "query getScopesForToken { client { scopes { edges { node } } } }"


def find_missing_scopes(granted: Iterable[str], required: Iterable[str]) -> List[str]:
    """
    Return the required scopes that no granted scope covers.

    A required scope counts as covered when it is a substring of a granted
    scope or a granted scope is a substring of it, so prefixed and versioned
    names (e.g. ``store_v2_products_read_only``) match too.
    """
    granted = list(granted)
    return [
        scope for scope in required
        if not any(scope in actual or actual in scope for actual in granted)
    ]


class ScopeValidator:
    def __init__(self, client: BigCommerceClient) -> None:
        self._client = client

    def fetch_granted_scopes(self) -> List[str]:
        resp = ensure_ok(self._client.post_json("/graphql", {"query": SCOPES_QUERY}))
        return parse_scope_response(resp.content).granted_scopes()

    def validate(self, required: Iterable[str] = REQUIRED_SCOPES) -> None:
        """Raise MissingScopesError if the token lacks any of ``required``."""
        granted = self.fetch_granted_scopes()
        logger.debug("Token grants scopes: %s", ", ".join(granted))
        missing = find_missing_scopes(granted, required)
        if missing:
            raise MissingScopesError(missing)
        logger.info("Access token has the required scopes")
