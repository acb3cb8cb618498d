"""Asset fetcher use case: download, decompress and unpack a release asset."""

from __future__ import annotations

import logging
from pathlib import Path

from gobinary.adapters.ports import ArchiveExtractorPort, HttpClientPort
from gobinary.domain.exceptions import DownloadFailedError
from gobinary.domain.release import ApiRequest

logger = logging.getLogger(__name__)


class AssetFetcher:
    """Streams a release asset through the archive extractor.

    The extractor only sees the body once the response reports status 200.
    Returning from fetch() means the archive has been fully unpacked.
    """

    def __init__(self, http_client: HttpClientPort, extractor: ArchiveExtractorPort) -> None:
        """Initialize the asset fetcher.

        Args:
            http_client: Port used to stream the asset.
            extractor: Port that unpacks the compressed stream.
        """
        self._http_client = http_client
        self._extractor = extractor

    def fetch(self, request: ApiRequest, destination: Path) -> None:
        """Download the asset and unpack it into destination.

        Args:
            request: Asset download request.
            destination: Extraction directory; created with parents if missing.

        Raises:
            DownloadFailedError: If destination cannot be created, or on
                transport, status, decompression or archive errors.
        """
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DownloadFailedError(
                f"Unable to create extraction directory {destination}: {e}",
                url=request.url,
                original_error=e,
            ) from e

        with self._http_client.stream(request) as response:
            if response.status_code != 200:
                raise DownloadFailedError(
                    f"Error downloading binary. HTTP Status Code: {response.status_code}",
                    url=request.url,
                    status_code=response.status_code,
                )
            logger.info("Downloading %s into %s", request.url, destination)
            self._extractor.extract(response.iter_bytes(), destination)
