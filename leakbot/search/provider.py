"""LeakOSINT result model and error hierarchy.

The API answers with a loosely-shaped JSON object. It is decoded exactly
once, here, into explicit dataclasses; nothing downstream probes raw dicts.

    {"Error code": "..."}                          → failure
    {"List": {"<db>": {"InfoLeak": str,
                       "Data": [{col: value}]}}}   → success
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# ════════════════════════════════════════════════════════
# Search Exception Hierarchy. Classify errors by type,
# not by string matching.  communication.errors maps these.
# ════════════════════════════════════════════════════════

class SearchError(Exception):
    """Base class for all search service errors."""
    pass

class SearchHTTPError(SearchError):
    """Non-2xx HTTP status from the search endpoint."""

    def __init__(self, status_code: int):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code

class SearchAPIError(SearchError):
    """The service answered with an "Error code" field."""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code

class SearchResponseError(SearchError):
    """Response body is not the JSON shape we understand."""
    pass


Scalar = Union[str, int, float, bool, None]
Record = dict[str, Scalar]


@dataclass
class DatabaseEntry:
    summary: Optional[str] = None
    records: list[Record] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Any) -> "DatabaseEntry":
        if not isinstance(data, dict):
            return cls()
        summary = data.get("InfoLeak")
        rows = data.get("Data")
        records = []
        if isinstance(rows, list):
            records = [dict(row) for row in rows if isinstance(row, dict)]
        return cls(summary=str(summary) if summary else None, records=records)


@dataclass
class SearchResult:
    error_code: Optional[str] = None
    entries: dict[str, DatabaseEntry] = field(default_factory=dict)

    @property
    def failed(self) -> bool:
        return self.error_code is not None

    @classmethod
    def from_payload(cls, data: Any) -> "SearchResult":
        """Decode a raw API response. Raises SearchResponseError on bad shape."""
        if not isinstance(data, dict):
            raise SearchResponseError(f"expected JSON object, got {type(data).__name__}")

        error_code = data.get("Error code")
        if error_code is not None:
            return cls(error_code=str(error_code))

        listing = data.get("List")
        if listing is None:
            return cls()
        if not isinstance(listing, dict):
            raise SearchResponseError(f"'List' must be an object, got {type(listing).__name__}")

        entries = {
            str(name): DatabaseEntry.from_payload(entry)
            for name, entry in listing.items()
        }
        return cls(entries=entries)
