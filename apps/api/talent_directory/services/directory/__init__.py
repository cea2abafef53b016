"""Directory search: filter normalization, query compilation, text matching, ranking, facets."""

from .directory import directory_service
from .errors import RecordStoreError, StoreOperation
from .facets import build_facet_catalog, load_facet_catalog
from .record_store import RecordStore, SqlAlchemyRecordStore
from .search_logic import run_directory_search
from .session import DirectorySearchSession

__all__ = [
    "directory_service",
    "RecordStoreError",
    "StoreOperation",
    "build_facet_catalog",
    "load_facet_catalog",
    "RecordStore",
    "SqlAlchemyRecordStore",
    "run_directory_search",
    "DirectorySearchSession",
]
