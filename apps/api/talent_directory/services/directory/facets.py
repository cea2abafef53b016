"""Facet catalog: distinct selectable values per facet across APPROVED profiles."""

import logging
from typing import Any, Iterable

from talent_directory.domain import FACET_FIELDS, ProfileStatus
from talent_directory.schemas.directory import FacetCatalog
from .errors import RecordStoreError
from .fields import get_array
from .record_store import RecordStore

logger = logging.getLogger(__name__)


def build_facet_catalog(rows: Iterable[Any]) -> FacetCatalog:
    """Union of each facet's values (exact string equality), sorted. Null arrays contribute nothing."""
    collected: dict[str, set[str]] = {f: set() for f in FACET_FIELDS}
    for row in rows:
        for facet in FACET_FIELDS:
            collected[facet].update(v for v in get_array(row, facet) if isinstance(v, str))
    return FacetCatalog(**{facet: sorted(values) for facet, values in collected.items()})


async def load_facet_catalog(store: RecordStore) -> tuple[FacetCatalog, bool]:
    """Read the facet projection of APPROVED profiles. Returns (catalog, error); empty catalog on failure."""
    try:
        rows = await store.query_all(FACET_FIELDS, ProfileStatus.APPROVED)
    except RecordStoreError as e:
        logger.warning("Facet catalog load failed, returning empty catalog: %s", e, exc_info=True)
        return FacetCatalog(), True
    return build_facet_catalog(rows), False
