"""
Artifact card set API client.

Fetching a set is two requests: the card set endpoint returns a
redirect descriptor (CDN root, path, expiry), and the CDN serves the
actual card set document.

API docs: https://github.com/ValveSoftware/ArtifactDeckCode#card-set-api
"""

from typing import Protocol

import httpx
from pydantic import ValidationError

from artifactlib.config import settings
from artifactlib.errors import FetchError
from artifactlib.models.cache import ExpirationWrapper, SetRedirect
from artifactlib.models.card import CardSetJson

REDIRECT_STEP = "redirect"
CARD_SET_STEP = "card_set"


class SetFetcher(Protocol):
    def fetch_set(self, set_index: int) -> ExpirationWrapper: ...


class CardSetFetcher:
    """Synchronous card set fetcher.

    Args:
        base_url: Card set endpoint root; the set index is appended
        client: Optional httpx client for connection reuse
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.client = client
        self.timeout = timeout if timeout is not None else settings.http_timeout
        self.headers = {"User-Agent": f"{settings.app_name}/1.0"}

    def _get_json(self, url: str, set_index: int, step: str) -> object:
        try:
            if self.client:
                response = self.client.get(url)
            else:
                response = httpx.get(
                    url,
                    headers=self.headers,
                    timeout=self.timeout,
                    follow_redirects=True,
                )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise FetchError(set_index, step, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise FetchError(set_index, step, str(e)) from e
        except ValueError as e:
            raise FetchError(set_index, step, f"invalid JSON: {e}") from e

    def fetch_redirect(self, set_index: int) -> SetRedirect:
        """
        Resolve where the card set document for `set_index` lives.

        Raises:
            FetchError: With step "redirect" on any failure
        """
        data = self._get_json(f"{self.base_url}/{set_index}", set_index, REDIRECT_STEP)
        try:
            return SetRedirect.model_validate(data)
        except ValidationError as e:
            raise FetchError(set_index, REDIRECT_STEP, str(e)) from e

    def fetch_set(self, set_index: int) -> ExpirationWrapper:
        """
        Fetch a card set and wrap it with its expiry.

        Args:
            set_index: Card set index (0-based)

        Returns:
            Envelope ready to be cached

        Raises:
            FetchError: If either request fails or returns invalid data
        """
        redirect = self.fetch_redirect(set_index)
        data = self._get_json(redirect.card_set_url, set_index, CARD_SET_STEP)
        try:
            card_set_json = CardSetJson.model_validate(data)
        except ValidationError as e:
            raise FetchError(set_index, CARD_SET_STEP, str(e)) from e

        return ExpirationWrapper(expire_time=redirect.expire_time, card_set_json=card_set_json)
