"""
Core package: orchestration of a catalog export.
This package exposes the Coordinator class which ties together scope
validation, the paginated product fetch and the JSON output file.
"""

from .coordinator import Coordinator

__all__ = [
    "Coordinator",
]
