import json
import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def write_products(products: List[Dict[str, Any]], path: Path) -> Path:
    """Write products as pretty-printed JSON and return the path written."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(products, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Saved %d products to %s", len(products), path)
    return path
