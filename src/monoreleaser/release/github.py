"""GitHub releases.

Tags the repository through git and publishes the changelog as a GitHub
release with the REST API, then uploads artifacts to the release.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from monoreleaser.exceptions import ConfigValidationError, ReleaseError, ReleaseRequestError
from monoreleaser.release.base import ReleaseDraft, ReleaseOptions, plan_release

if TYPE_CHECKING:
    from monoreleaser.config.models import MonoreleaserConfig
    from monoreleaser.core.repository import Repository
    from monoreleaser.release.base import Artifact

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_UPLOADS_URL = "https://uploads.github.com"
GITHUB_MEDIA_TYPE = "application/vnd.github+json"


class GithubReleaser:
    """Releaser publishing to GitHub releases.

    Args:
        repository: Repository to tag
        owner: Owner (user or organization) of the GitHub repository
        token: Token used as bearer authorization
        api_url: Base URL of the REST API (GitHub Enterprise: ``https://host/api/v3``)
        uploads_url: Base URL of the asset upload API
        timeout: Request timeout in seconds
        transport: Custom httpx transport, mainly for tests
    """

    def __init__(
        self,
        repository: Repository,
        owner: str,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        uploads_url: str = DEFAULT_UPLOADS_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.repository = repository
        path = f"repos/{owner}/{repository.name}/releases"
        self.release_url = f"{api_url.rstrip('/')}/{path}"
        self.asset_url = f"{uploads_url.rstrip('/')}/{path}"
        self._client = httpx.Client(
            headers={
                "Accept": GITHUB_MEDIA_TYPE,
                "Authorization": f"Bearer {token}",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls,
        repository: Repository,
        config: MonoreleaserConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> GithubReleaser:
        """Create a releaser from configuration.

        Raises:
            ConfigValidationError: If the owner or token is missing
        """
        if not config.owner:
            raise ConfigValidationError("GitHub releases require 'owner' to be configured")
        if not config.github.token:
            raise ConfigValidationError(
                "GitHub releases require a token (github.token or MR_GITHUB_TOKEN)"
            )
        return cls(
            repository,
            config.owner,
            config.github.token,
            api_url=config.github.api_url,
            uploads_url=config.github.uploads_url,
            timeout=config.github.timeout,
            transport=transport,
        )

    def __enter__(self) -> GithubReleaser:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def release(self, version: str, options: ReleaseOptions) -> ReleaseDraft:
        draft = plan_release(self.repository, version, options.module)
        release_id = self._post(draft)
        for artifact in options.artifacts:
            self._upload(release_id, artifact)
        return draft

    def _post(self, draft: ReleaseDraft) -> int:
        payload = {
            "tag_name": draft.tag.name,
            "body": draft.changelog,
            "name": draft.tag.name,
        }
        logger.debug("Creating GitHub release %s at %s", draft.tag.name, self.release_url)
        data = self._request("Failed to create release", self.release_url, json=payload)
        try:
            return int(data["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ReleaseError(f"Unexpected release response: {data!r}") from e

    def _upload(self, release_id: int, artifact: Artifact) -> None:
        url = f"{self.asset_url}/{release_id}/assets"
        content = artifact.read()
        logger.debug("Uploading %s (%d bytes) to %s", artifact.name, len(content), url)
        self._request(
            f"Failed to upload {artifact.name}",
            url,
            params={"name": artifact.name},
            headers={"Content-Type": "application/octet-stream"},
            content=content,
        )

    def _request(self, error: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._client.post(url, **kwargs)
        except httpx.HTTPError as e:
            raise ReleaseError(f"{error}: {e}") from e

        if not response.is_success:
            raise ReleaseRequestError(error, response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise ReleaseError(f"{error}: response is not JSON") from e
