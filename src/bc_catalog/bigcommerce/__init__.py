"""BigCommerce API interaction package."""

from .client import BigCommerceClient, Credential
from .fetcher import ProductFetcher
from .scopes import REQUIRED_SCOPES, ScopeValidator

__all__ = ["BigCommerceClient", "Credential", "ProductFetcher", "REQUIRED_SCOPES", "ScopeValidator"]
