"""HTTP client for the public Open Food Facts taxonomies."""

import logging
from typing import Any

import httpx

from infrastructure.config.models import BuildConfig

logger = logging.getLogger(__name__)


class TaxonomyFetchError(RuntimeError):
    """A taxonomy could not be downloaded (transport error or non-2xx status)."""


class TaxonomyClient:
    """
    Downloads taxonomy documents (JSON objects keyed by namespaced tag).

    - One GET per document, no retries
    - Every request carries the configured User-Agent
    - Any failure is raised; there is no partial or best-effort mode
    """

    def __init__(self, *, client: httpx.Client) -> None:
        self.client = client

    @classmethod
    def from_cfg(cls, cfg: BuildConfig, *, transport: httpx.BaseTransport | None = None) -> "TaxonomyClient":
        kwargs: dict[str, Any] = {
            "headers": {"User-Agent": cfg.user_agent, "Accept": "application/json"},
            "follow_redirects": True,
        }
        if cfg.timeout_s is not None:
            kwargs["timeout"] = cfg.timeout_s
        if transport is not None:
            kwargs["transport"] = transport
        return cls(client=httpx.Client(**kwargs))

    def fetch_taxonomy(self, url: str) -> dict[str, Any]:
        """
        GET a taxonomy document and decode it.

        Raises:
            TaxonomyFetchError: On transport failure or a non-success status
            json.JSONDecodeError: If the body is not JSON
            ValueError: If the JSON is not an object
        """
        logger.info("Fetching %s...", url)
        try:
            resp = self.client.get(url)
        except httpx.HTTPError as e:
            raise TaxonomyFetchError(f"Fetch failed for {url}: {e}") from e

        if not resp.is_success:
            raise TaxonomyFetchError(f"Fetch failed {resp.status_code} for {url}")

        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {url}, got {type(data).__name__}")

        logger.info("Fetched %s: %d tags", url, len(data))
        return data

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "TaxonomyClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
