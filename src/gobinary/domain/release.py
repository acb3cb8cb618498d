"""Release-hosting value objects.

Records parsed from the GitHub releases API and the request descriptors used
to talk to it. None of these are persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

JSON_MEDIA_TYPE = "application/vnd.github+json"
OCTET_STREAM_MEDIA_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class Asset:
    """A downloadable file attached to a release.

    Attributes:
        name: File name as shown on the release page.
        id: Numeric identifier used by the asset download endpoint.
    """

    name: str
    id: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Asset:
        """Build an asset from an API record.

        Raises:
            KeyError, TypeError, ValueError: If ``id`` is missing or not numeric.
        """
        return cls(name=str(data.get("name", "")), id=int(data["id"]))


@dataclass(frozen=True)
class Release:
    """A tagged release and its assets.

    Attributes:
        tag_name: Tag the release was published under, e.g. ``v1.0.0``.
        assets: Assets in the order the API returned them.
    """

    tag_name: str
    assets: tuple[Asset, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Release:
        """Build a release from an API record.

        Asset entries without a usable numeric id cannot be downloaded and
        are left out.
        """
        assets = []
        for item in data.get("assets") or ():
            if not isinstance(item, Mapping):
                continue
            try:
                assets.append(Asset.from_dict(item))
            except (KeyError, TypeError, ValueError):
                continue
        return cls(tag_name=str(data.get("tag_name", "")), assets=tuple(assets))

    def find_asset(self, name: str) -> Asset | None:
        """Return the first asset named exactly ``name``, if any."""
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None


@dataclass(frozen=True)
class ApiRequest:
    """Description of a single HTTP request to the release host.

    Attributes:
        method: HTTP method.
        url: Absolute URL.
        headers: Request headers, authorization included when required.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)


def _headers(accept: str, token: str | None) -> dict[str, str]:
    headers = {"Accept": accept}
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def releases_request(
    api_url: str, owner: str, repo: str, token: str | None = None
) -> ApiRequest:
    """Build the "list releases for owner/repo" request."""
    return ApiRequest(
        method="GET",
        url=f"{api_url.rstrip('/')}/repos/{owner}/{repo}/releases",
        headers=_headers(JSON_MEDIA_TYPE, token),
    )


def asset_download_request(
    api_url: str, owner: str, repo: str, asset_id: int, token: str | None = None
) -> ApiRequest:
    """Build the "download release asset by id" request.

    The octet-stream Accept header makes the API return the raw bytes
    (via a redirect) instead of the asset's JSON metadata.
    """
    return ApiRequest(
        method="GET",
        url=f"{api_url.rstrip('/')}/repos/{owner}/{repo}/releases/assets/{asset_id}",
        headers=_headers(OCTET_STREAM_MEDIA_TYPE, token),
    )
