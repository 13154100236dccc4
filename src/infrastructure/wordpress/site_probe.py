"""
Infrastructure adapter: WordPress REST discovery (/wp-json/) → ISiteProbe.

The sync only works when the target site exposes the core wp/v2 namespace.
When it does not, the composition root disables the publish hook and surfaces
the returned notice.
"""

import logging
from typing import Optional

import httpx

from src.domain.ports.site_probe_port import ISiteProbe

logger = logging.getLogger(__name__)


class WordPressSiteProbe(ISiteProbe):
    REQUIRED_NAMESPACE = "wp/v2"

    def __init__(
        self,
        site_url: str,
        verify_tls: bool = True,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._site_url = site_url.rstrip("/")
        self._verify_tls = verify_tls
        self._client = client

    def check(self) -> Optional[str]:
        url = f"{self._site_url}/wp-json/"
        try:
            if self._client is not None:
                namespaces = self._fetch_namespaces(self._client, url)
            else:
                with httpx.Client(verify=self._verify_tls) as client:
                    namespaces = self._fetch_namespaces(client, url)
        except (httpx.HTTPError, ValueError, AttributeError) as exc:
            logger.error("Target site REST API unreachable at %s: %s", url, exc)
            return f"Post translation sync requires the WordPress REST API at {url} ({exc})."

        if self.REQUIRED_NAMESPACE not in namespaces:
            return (
                f"Post translation sync requires the '{self.REQUIRED_NAMESPACE}' REST "
                f"namespace on {self._site_url}."
            )
        return None

    @staticmethod
    def _fetch_namespaces(client: httpx.Client, url: str) -> list:
        response = client.get(url, timeout=10)
        response.raise_for_status()
        return response.json().get("namespaces", [])
