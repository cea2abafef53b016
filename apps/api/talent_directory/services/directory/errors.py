"""Error types for the directory search pipeline."""

from enum import Enum
from typing import Optional


class StoreOperation(str, Enum):
    """Record store operations, for error reporting."""
    QUERY = "query"
    QUERY_ALL = "query_all"


class RecordStoreError(Exception):
    """Record store failure with operation context. `message` must not carry user data."""
    def __init__(self, operation: StoreOperation, message: str, cause: Optional[Exception] = None):
        self.operation = operation
        self.message = message
        self.cause = cause
        super().__init__(f"[{operation.value}] {message}")
