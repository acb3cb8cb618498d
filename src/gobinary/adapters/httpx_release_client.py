"""HTTPX-based implementation of the HttpClientPort.

This adapter uses httpx to list releases and stream release assets from the
GitHub REST API.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import httpx

from gobinary.adapters.ports import HttpClientPort
from gobinary.domain.exceptions import DownloadFailedError, ReleaseQueryFailedError
from gobinary.domain.release import ApiRequest

logger = logging.getLogger(__name__)


class HttpxReleaseClient:
    """HTTPX-based adapter for the release-hosting API.

    Redirects are followed, which the asset endpoint relies on to hand over
    to object storage. No timeout is applied unless one is given.

    This adapter implements HttpClientPort for use by the release asset
    resolver and the asset fetcher.
    """

    def __init__(
        self,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the HTTPX release client.

        Args:
            timeout: Request timeout in seconds. None waits indefinitely.
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
        """
        self._timeout = timeout
        self._client = client

    @contextmanager
    def _session(self) -> Iterator[httpx.Client]:
        if self._client is not None:
            yield self._client
        else:
            with httpx.Client(timeout=self._timeout, follow_redirects=True) as client:
                yield client

    def get_json(self, request: ApiRequest) -> Any:
        """Issue a request and decode its JSON body.

        Args:
            request: The request to send.

        Returns:
            Decoded JSON value.

        Raises:
            ReleaseQueryFailedError: On transport errors, non-200 status or
                a body that is not JSON.
        """
        logger.debug("%s %s", request.method, request.url)
        try:
            with self._session() as client:
                response = client.request(
                    request.method,
                    request.url,
                    headers=request.headers,
                    follow_redirects=True,
                )
        except httpx.HTTPError as e:
            raise ReleaseQueryFailedError(
                f"Error downloading from URL: {request.url} {e}",
                url=request.url,
                original_error=e,
            ) from e

        if response.status_code != 200:
            raise ReleaseQueryFailedError(
                "Error requesting release info. HTTP Status Code: "
                f"{response.status_code}",
                url=request.url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ReleaseQueryFailedError(
                f"Invalid JSON in release info from URL: {request.url}",
                url=request.url,
                status_code=response.status_code,
                original_error=e,
            ) from e

    @contextmanager
    def stream(self, request: ApiRequest) -> Iterator[httpx.Response]:
        """Open a streamed response for a request.

        The body is not read until the caller iterates it. Transport errors
        raised while the caller is consuming the body are converted too.

        Args:
            request: The request to send.

        Yields:
            The open httpx.Response.

        Raises:
            DownloadFailedError: On transport errors.
        """
        logger.debug("%s %s (streamed)", request.method, request.url)
        try:
            with self._session() as client:
                with client.stream(
                    request.method,
                    request.url,
                    headers=request.headers,
                    follow_redirects=True,
                ) as response:
                    yield response
        except (httpx.HTTPError, httpx.StreamError) as e:
            raise DownloadFailedError(
                f"Error downloading from URL: {request.url} {e}",
                url=request.url,
                original_error=e,
            ) from e


# Runtime protocol check
assert isinstance(HttpxReleaseClient(), HttpClientPort)
