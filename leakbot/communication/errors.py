"""Channel-agnostic error classification for user-facing messages."""

import asyncio

import httpx

from ..search.provider import SearchAPIError, SearchHTTPError, SearchResponseError


def classify_error(e: Exception) -> str:
    """Classify a search failure into a short user-facing reason.

    The reason is embedded in the "Unable to fetch" reply, so it names
    the HTTP status or the service's error code verbatim.
    """
    # 1-2: Typed search exceptions
    if isinstance(e, SearchAPIError):
        return e.code
    if isinstance(e, SearchHTTPError):
        return f"HTTP {e.status_code}"

    # 3: Body we could not decode
    if isinstance(e, SearchResponseError):
        return "Unexpected response format from LeakOSINT"

    # 4-5: Network / timeout errors
    if isinstance(e, httpx.TimeoutException):
        return "Request timed out"
    if isinstance(e, asyncio.TimeoutError):
        return "Request timed out"
    if isinstance(e, httpx.ConnectError):
        return "Cannot connect to LeakOSINT"
    if isinstance(e, httpx.TransportError):
        return f"Network error ({type(e).__name__})"

    # 6: Fallback, message if there is one, else the type name
    return str(e) or type(e).__name__
