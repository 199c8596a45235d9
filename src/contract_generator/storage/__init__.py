"""
Storage collaborators: interfaces and local implementations.
"""

from .base import BlobStore, DocumentStore, PlayerRecords
from .local import LocalBlobStore
from .memory import InMemoryBlobStore, InMemoryPlayerRecords

__all__ = [
    "BlobStore",
    "DocumentStore",
    "PlayerRecords",
    "LocalBlobStore",
    "InMemoryBlobStore",
    "InMemoryPlayerRecords",
]
