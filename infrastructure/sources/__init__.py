"""Remote taxonomy sources."""

from infrastructure.sources.taxonomy_client import TaxonomyClient, TaxonomyFetchError

__all__ = [
    "TaxonomyClient",
    "TaxonomyFetchError",
]
