"""Catalog serialization utilities."""

import logging
from pathlib import Path

from pydantic import BaseModel

from domain.schemas import CatalogEnvelope
from infrastructure.io import write_json

logger = logging.getLogger(__name__)


def make_envelope(items: list[BaseModel]) -> CatalogEnvelope:
    return CatalogEnvelope.wrap(items)


def write_catalog(path: Path, items: list[BaseModel]) -> Path:
    """
    Wrap items in the `{version, items}` envelope and write them to path.

    The file is replaced wholesale; nothing from a previous run is merged in.
    """
    envelope = make_envelope(items)
    write_json(path, envelope.model_dump(mode="json"))
    logger.info("Saved %s (%d entries)", path, len(envelope.items))
    return path
