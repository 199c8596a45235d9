"""
In-memory collaborators, for tests and local experiments.
"""

from datetime import date

from ..schemas.base import AgencyStatus
from ..schemas.request import ContractDocument, PlayerRecord


class InMemoryBlobStore:
    """Dictionary backed ``BlobStore`` and ``DocumentStore``."""

    def __init__(self, objects: dict[str, bytes] | None = None):
        self.objects: dict[str, bytes] = dict(objects or {})
        self.content_types: dict[str, str] = {}

    def get(self, key: str) -> bytes | None:
        return self.objects.get(key)

    def put(self, key: str, data: bytes, content_type: str = "application/pdf") -> str:
        self.objects[key] = data
        self.content_types[key] = content_type
        return f"memory://{key}"


class InMemoryPlayerRecords:
    """Dictionary backed ``PlayerRecords``."""

    def __init__(self, players: list[PlayerRecord] | None = None):
        self.players = {player.id: player for player in players or []}
        self.documents: dict[str, list[ContractDocument]] = {}
        self.agency_end_dates: dict[str, date] = {}
        self.statuses: dict[str, AgencyStatus] = {}

    def get_player(self, player_id: str) -> PlayerRecord | None:
        return self.players.get(player_id)

    def record_contract(
        self,
        player_id: str,
        document: ContractDocument,
        agency_end_date: date,
        status: AgencyStatus,
    ) -> None:
        self.documents.setdefault(player_id, []).append(document)
        self.agency_end_dates[player_id] = agency_end_date
        self.statuses[player_id] = status
