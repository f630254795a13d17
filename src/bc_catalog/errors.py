from typing import Iterable, List


class CatalogExportError(Exception):
    """Base class for every failure that aborts a catalog export."""


class TransportError(CatalogExportError):
    """The HTTP exchange could not be completed (DNS, connection, timeout...)."""


class UpstreamError(CatalogExportError):
    def __init__(self, status: int, status_text: str, url: str) -> None:
        self.status = status
        self.status_text = status_text
        self.url = url
        super().__init__(f"Received {status} {status_text} from {url}")


class SchemaError(CatalogExportError):
    """A response body did not have the expected shape."""


class MissingScopesError(CatalogExportError):
    def __init__(self, missing: Iterable[str]) -> None:
        self.missing: List[str] = list(missing)
        super().__init__(f"Missing scopes: {', '.join(self.missing)}")
