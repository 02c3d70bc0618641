"""LeakOSINT search client: POST a query, decode the JSON answer."""

import logging

import httpx

from .provider import SearchAPIError, SearchHTTPError, SearchResponseError, SearchResult

logger = logging.getLogger("leakbot.search")


class LeakOsintClient:
    """Thin async client for the LeakOSINT API.

    One short-lived ``httpx.AsyncClient`` per request, bounded by ``timeout``.
    No retries.
    """

    def __init__(
        self,
        api_token: str,
        url: str = "https://leakosintapi.com/",
        limit: int = 100,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_token = api_token
        self.url = url
        self.limit = limit
        self.timeout = timeout
        # Injected in tests (httpx.MockTransport)
        self._transport = transport

    @classmethod
    def from_settings(cls, settings) -> "LeakOsintClient":
        return cls(
            api_token=settings.leakosint_api_token,
            url=settings.leakosint_api_url,
            limit=settings.leakosint_limit,
            timeout=settings.leakosint_timeout,
        )

    async def search(self, query: str, lang: str) -> SearchResult:
        """Run one search.

        Args:
            query: Free-text query, sent as-is
            lang: Result language ("ru"/"en")

        Returns:
            Decoded successful SearchResult

        Raises:
            SearchHTTPError: non-2xx status
            SearchAPIError: service reported an "Error code"
            SearchResponseError: body is not valid JSON of the expected shape
            httpx.TimeoutException / httpx.TransportError: network failures
        """
        payload = {
            "token": self.api_token,
            "request": query,
            "limit": self.limit,
            "lang": lang,
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.url, json=payload)

        if not response.is_success:
            logger.warning(f"LeakOSINT returned HTTP {response.status_code}")
            raise SearchHTTPError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise SearchResponseError(f"invalid JSON: {e}") from e

        result = SearchResult.from_payload(data)
        if result.failed:
            logger.info(f"LeakOSINT error code: {result.error_code}")
            raise SearchAPIError(result.error_code)

        logger.debug(f"LeakOSINT returned {len(result.entries)} database(s) for lang={lang}")
        return result
