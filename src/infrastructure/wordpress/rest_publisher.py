"""
Infrastructure adapter: WordPress REST API (wp/v2/posts) → IPublisher.

Creates a published post on the target site authenticated with an
application password over HTTP Basic. TLS certificates are verified unless
verification is switched off explicitly in configuration.
"""

import logging
from typing import Optional

import httpx

from src.domain.entities.post_translation import TranslatedDocument
from src.domain.ports.publisher_port import IPublisher

logger = logging.getLogger(__name__)


class WordPressRestPublisher(IPublisher):
    """Publishes translated documents as new posts on a remote WordPress site."""

    POSTS_PATH = "/wp-json/wp/v2/posts"

    def __init__(
        self,
        site_url: str,
        username: str,
        application_password: str,
        verify_tls: bool = True,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            site_url:             Base URL of the target site, e.g. https://example.com
            username:             User that owns the application password.
            application_password: WordPress application password.
            verify_tls:           Verify the target's certificate. Disable only for
                                  sites with self-signed certificates.
            client:               Optional preconfigured httpx.Client (tests pass one
                                  built on httpx.MockTransport).
        """
        self._url = site_url.rstrip("/") + self.POSTS_PATH
        if not verify_tls:
            logger.warning("TLS verification disabled for %s", site_url)
        self._owns_client = client is None
        self._client = client or httpx.Client(verify=verify_tls)
        self._auth = httpx.BasicAuth(username, application_password)

    def close(self) -> None:
        """Close the HTTP client if this publisher created it."""
        if self._owns_client:
            self._client.close()

    def publish(self, document: TranslatedDocument) -> bool:
        payload = {
            "title": document.title,
            "content": document.body,
            "status": "publish",
        }
        try:
            response = self._client.post(self._url, json=payload, auth=self._auth)
        except httpx.HTTPError as exc:
            logger.error("Error sending post to target site: %s", exc)
            return False

        if response.status_code != httpx.codes.CREATED:
            logger.error(
                "Target site rejected post. Status Code: %s, Response: %s",
                response.status_code,
                response.text[:500],
            )
            return False

        created = _safe_json(response)
        logger.info(
            "Post created on target site: id=%s link=%s",
            created.get("id"),
            created.get("link"),
        )
        return True


def _safe_json(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
