"""Fake HTTP client for testing.

Provides a test double for HttpClientPort that serves preconfigured JSON
bodies and byte streams keyed by URL, without network operations.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

from gobinary.domain.exceptions import ReleaseQueryFailedError
from gobinary.domain.release import ApiRequest


@dataclass
class FakeStreamedResponse:
    """In-memory stand-in for a streamed HTTP response.

    Attributes:
        status_code: Status reported before the body is read.
        chunks: Body chunks yielded by iter_bytes().
    """

    status_code: int = 200
    chunks: list[bytes] = field(default_factory=list)

    def iter_bytes(self) -> Iterator[bytes]:
        yield from self.chunks


class FakeHttpClient:
    """Fake implementation of HttpClientPort for testing.

    Unknown URLs behave like a 404. Every request is recorded so tests can
    assert which calls were (or were not) made.

    Example:
        >>> fake = FakeHttpClient()
        >>> fake.add_json("https://api.test/releases", [{"tag_name": "v1.0.0"}])
        >>> fake.get_json(ApiRequest("GET", "https://api.test/releases"))
        [{'tag_name': 'v1.0.0'}]
    """

    def __init__(self) -> None:
        self._json: dict[str, Any] = {}
        self._streams: dict[str, FakeStreamedResponse] = {}
        self._exceptions: dict[str, BaseException] = {}
        self._requests: list[ApiRequest] = []

    @property
    def requests(self) -> list[ApiRequest]:
        """Return every request received, in order."""
        return self._requests

    def add_json(self, url: str, body: Any) -> None:
        """Serve ``body`` from get_json() for ``url``."""
        self._json[url] = body

    def add_stream(
        self, url: str, body: bytes, status_code: int = 200, chunk_size: int = 512
    ) -> None:
        """Serve ``body`` from stream() for ``url``, split into chunks."""
        chunks = [body[i : i + chunk_size] for i in range(0, len(body), chunk_size)]
        self._streams[url] = FakeStreamedResponse(status_code=status_code, chunks=chunks)

    def set_exception(self, url: str, exception: BaseException) -> None:
        """Raise ``exception`` for any request to ``url``."""
        self._exceptions[url] = exception

    def get_json(self, request: ApiRequest) -> Any:
        self._requests.append(request)
        if request.url in self._exceptions:
            raise self._exceptions[request.url]
        if request.url not in self._json:
            raise ReleaseQueryFailedError(
                "Error requesting release info. HTTP Status Code: 404",
                url=request.url,
                status_code=404,
            )
        return self._json[request.url]

    @contextmanager
    def stream(self, request: ApiRequest) -> Iterator[FakeStreamedResponse]:
        self._requests.append(request)
        if request.url in self._exceptions:
            raise self._exceptions[request.url]
        yield self._streams.get(request.url, FakeStreamedResponse(status_code=404))
