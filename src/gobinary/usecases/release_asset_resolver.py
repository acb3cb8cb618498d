"""Release asset resolver use case for locating the asset to download."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gobinary.adapters.ports import HttpClientPort
from gobinary.domain.binary import InstallOptions
from gobinary.domain.exceptions import (
    AssetNotFoundError,
    MissingTokenError,
    ReleaseNotFoundError,
    ReleaseQueryFailedError,
)
from gobinary.domain.release import (
    ApiRequest,
    Asset,
    Release,
    asset_download_request,
    releases_request,
)
from gobinary.domain.settings import DEFAULT_API_URL, TOKEN_ENV_VAR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedAsset:
    """The release asset matching the install options.

    Attributes:
        release: The release whose tag matched.
        asset: The asset whose name matched.
        download_request: Request that fetches the asset's raw bytes.
    """

    release: Release
    asset: Asset
    download_request: ApiRequest


class ReleaseAssetResolver:
    """Use case for finding a release asset on the release host.

    Lists the repository's releases with one request, picks the release
    tagged ``v<version>`` and, inside it, the asset with the rendered name.
    Nothing is downloaded here.
    """

    def __init__(
        self,
        http_client: HttpClientPort,
        api_url: str = DEFAULT_API_URL,
        token: str | None = None,
    ) -> None:
        """Initialize the release asset resolver.

        Args:
            http_client: Port used to query the API.
            api_url: Base URL of the release-hosting API.
            token: Token sent when the options require authentication.
        """
        self._http_client = http_client
        self._api_url = api_url
        self._token = token

    def resolve(self, options: InstallOptions) -> ResolvedAsset:
        """Locate the asset for the given install options.

        Args:
            options: Resolved install options.

        Returns:
            ResolvedAsset with the prepared download request.

        Raises:
            MissingTokenError: If auth is required and no token is available.
            ReleaseQueryFailedError: If listing releases fails.
            ReleaseNotFoundError: If no release carries the tag.
            AssetNotFoundError: If the release lacks the asset.
        """
        token = self._token_for(options)

        request = releases_request(self._api_url, options.owner, options.repo, token)
        logger.info("Querying releases of %s/%s", options.owner, options.repo)
        releases = self._parse_releases(self._http_client.get_json(request), request)

        release = next((r for r in releases if r.tag_name == options.tag), None)
        if release is None:
            raise ReleaseNotFoundError(options.tag)

        asset = release.find_asset(options.asset_name)
        if asset is None:
            raise AssetNotFoundError(options.asset_name)

        logger.info(
            "Found asset %s (id %d) in release %s", asset.name, asset.id, release.tag_name
        )
        return ResolvedAsset(
            release=release,
            asset=asset,
            download_request=asset_download_request(
                self._api_url, options.owner, options.repo, asset.id, token
            ),
        )

    def _token_for(self, options: InstallOptions) -> str | None:
        if not options.auth:
            return None
        if not self._token:
            raise MissingTokenError(
                f"Please provide {TOKEN_ENV_VAR} environment variable to authenticate"
            )
        return self._token

    def _parse_releases(self, body: object, request: ApiRequest) -> list[Release]:
        if not isinstance(body, list):
            raise ReleaseQueryFailedError(
                f"Unexpected release info from URL: {request.url}", url=request.url
            )
        try:
            return [Release.from_dict(item) for item in body if isinstance(item, dict)]
        except (TypeError, ValueError, AttributeError) as e:
            raise ReleaseQueryFailedError(
                f"Unexpected release info from URL: {request.url}",
                url=request.url,
                original_error=e,
            ) from e
