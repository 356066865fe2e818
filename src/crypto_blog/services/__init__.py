"""Client-side services for the Crypto Blog."""

from .store import PostStore, PostStoreClient, PostStoreError, PostStoreRejectedError
from .validation import Draft, ValidationResult, validate
from .view_state import ViewState, ViewStateController

__all__ = [
    "Draft",
    "PostStore",
    "PostStoreClient",
    "PostStoreError",
    "PostStoreRejectedError",
    "ValidationResult",
    "ViewState",
    "ViewStateController",
    "validate",
]
