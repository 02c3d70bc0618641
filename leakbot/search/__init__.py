"""Search service boundary for LeakOSINT client and decoded result model."""

from .leakosint import LeakOsintClient
from .provider import (
    DatabaseEntry,
    SearchAPIError,
    SearchError,
    SearchHTTPError,
    SearchResponseError,
    SearchResult,
)

__all__ = [
    "LeakOsintClient",
    "DatabaseEntry",
    "SearchResult",
    "SearchError",
    "SearchHTTPError",
    "SearchAPIError",
    "SearchResponseError",
]
