"""Unit tests for AssetFetcher use case."""

from __future__ import annotations

from pathlib import Path

import pytest

from gobinary.adapters.fakes import FakeArchiveExtractor, FakeHttpClient
from gobinary.adapters.tar_gz_extractor import TarGzExtractor
from gobinary.domain.exceptions import DownloadFailedError
from gobinary.domain.release import ApiRequest
from gobinary.usecases.asset_fetcher import AssetFetcher

ASSET_URL = "https://api.test/repos/acme/mytool/releases/assets/11"
REQUEST = ApiRequest("GET", ASSET_URL, {"Accept": "application/octet-stream"})


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.AssetFetcher")
class TestAssetFetcher:
    """Test AssetFetcher.fetch()."""

    def test_streams_body_into_extractor(self, tmp_path: Path) -> None:
        http_client = FakeHttpClient()
        http_client.add_stream(ASSET_URL, b"x" * 2000, chunk_size=300)
        extractor = FakeArchiveExtractor({"mytool": b"binary"})
        destination = tmp_path / "bin"

        AssetFetcher(http_client, extractor).fetch(REQUEST, destination)

        assert extractor.received == b"x" * 2000
        assert extractor.calls == [destination]
        assert (destination / "mytool").read_bytes() == b"binary"

    def test_creates_destination_with_parents(self, tmp_path: Path) -> None:
        http_client = FakeHttpClient()
        http_client.add_stream(ASSET_URL, b"")
        destination = tmp_path / "a" / "b" / "bin"

        AssetFetcher(http_client, FakeArchiveExtractor()).fetch(REQUEST, destination)

        assert destination.is_dir()

    def test_existing_destination_is_fine(self, tmp_path: Path) -> None:
        http_client = FakeHttpClient()
        http_client.add_stream(ASSET_URL, b"")

        AssetFetcher(http_client, FakeArchiveExtractor()).fetch(REQUEST, tmp_path)

    def test_destination_is_a_file(self, tmp_path: Path) -> None:
        http_client = FakeHttpClient()
        http_client.add_stream(ASSET_URL, b"payload")
        extractor = FakeArchiveExtractor()
        destination = tmp_path / "bin"
        destination.write_bytes(b"")

        with pytest.raises(DownloadFailedError) as exc:
            AssetFetcher(http_client, extractor).fetch(REQUEST, destination)

        assert isinstance(exc.value.original_error, OSError)
        assert http_client.requests == []
        assert extractor.calls == []

    @pytest.mark.parametrize("status_code", [302, 401, 404, 500])
    def test_non_200_status(self, tmp_path: Path, status_code: int) -> None:
        http_client = FakeHttpClient()
        http_client.add_stream(ASSET_URL, b"payload", status_code=status_code)
        extractor = FakeArchiveExtractor()

        with pytest.raises(DownloadFailedError) as exc:
            AssetFetcher(http_client, extractor).fetch(REQUEST, tmp_path)

        assert str(exc.value) == (
            f"Error downloading binary. HTTP Status Code: {status_code}"
        )
        assert exc.value.status_code == status_code
        assert extractor.calls == []

    def test_transport_error_propagates(self, tmp_path: Path) -> None:
        http_client = FakeHttpClient()
        http_client.set_exception(
            ASSET_URL, DownloadFailedError("Error downloading from URL", url=ASSET_URL)
        )

        with pytest.raises(DownloadFailedError, match="Error downloading from URL"):
            AssetFetcher(http_client, FakeArchiveExtractor()).fetch(REQUEST, tmp_path)

    def test_extraction_error_propagates(self, tmp_path: Path) -> None:
        http_client = FakeHttpClient()
        http_client.add_stream(ASSET_URL, b"junk")
        extractor = FakeArchiveExtractor()
        extractor.set_exception(DownloadFailedError("Error extracting archive"))

        with pytest.raises(DownloadFailedError, match="Error extracting archive"):
            AssetFetcher(http_client, extractor).fetch(REQUEST, tmp_path)

    def test_real_archive_through_tar_extractor(self, tmp_path: Path, tar_gz) -> None:
        http_client = FakeHttpClient()
        http_client.add_stream(ASSET_URL, tar_gz({"mytool": b"\x7fELF"}), chunk_size=64)

        AssetFetcher(http_client, TarGzExtractor()).fetch(REQUEST, tmp_path / "bin")

        assert (tmp_path / "bin" / "mytool").read_bytes() == b"\x7fELF"
