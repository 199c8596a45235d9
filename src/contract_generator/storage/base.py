"""
Interfaces of the collaborators the signing service depends on.

The service receives implementations explicitly; nothing in the package
holds a module-level client.
"""

from datetime import date
from typing import Protocol

from ..schemas.base import AgencyStatus
from ..schemas.request import ContractDocument, PlayerRecord


class BlobStore(Protocol):
    """Read access to templates and font files."""

    def get(self, key: str) -> bytes | None:
        """Return the bytes stored under ``key``, or None if there is no such object."""
        ...


class DocumentStore(Protocol):
    """Durable storage for generated contracts."""

    def put(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        """Store ``data`` under ``key`` and return a long-lived retrieval reference."""
        ...


class PlayerRecords(Protocol):
    """The player records the service reads and annotates."""

    def get_player(self, player_id: str) -> PlayerRecord | None:
        ...

    def record_contract(
        self,
        player_id: str,
        document: ContractDocument,
        agency_end_date: date,
        status: AgencyStatus,
    ) -> None:
        ...
