"""
Main entry point for the Contract Generator.

This module provides the signing service used by the player portal: it loads
the template and fonts from storage, composes the signed contract, stores it
and annotates the player record.
"""

import logging
from datetime import datetime
from typing import Any, Callable

from pydantic import ValidationError

from .config import Config
from .document.layout import LayoutSettings
from .engine import compose_contract
from .exceptions import (
    ContractError,
    ContractGenerationError,
    InvalidContractRequest,
    PlayerNotFoundError,
)
from .schemas.base import AgencyStatus, TemplateType
from .schemas.contract import ContractFields
from .schemas.request import ContractDocument, ContractRequest, ContractResult, PlayerRecord
from .storage.base import BlobStore, DocumentStore, PlayerRecords
from .utils.date_utils import add_years, format_spanish_date
from .utils.image_utils import decode_data_url

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Jugador"
CONTRACT_DOCUMENT_NAME = "Contrato Agencia (Renovado)"


class ContractService:
    """
    Generates, stores and records signed agency contracts.

    Attributes:
        templates: Blob store holding contract templates and font files
        documents: Store receiving the generated contracts
        players: Player record store
        settings: Default layout settings
        layout_overrides: Layout calibration per template type
    """

    def __init__(
        self,
        templates: BlobStore,
        documents: DocumentStore,
        players: PlayerRecords,
        settings: LayoutSettings | None = None,
        layout_overrides: dict[TemplateType, LayoutSettings] | None = None,
        clock: Callable[[], datetime] = datetime.now,
        config: type[Config] | Config = Config,
    ):
        self.templates = templates
        self.documents = documents
        self.players = players
        self.settings = settings or LayoutSettings.from_config(config)
        self.layout_overrides = dict(layout_overrides or {})
        self.clock = clock
        self.config = config

    def settings_for(self, template_type: TemplateType) -> LayoutSettings:
        return self.layout_overrides.get(template_type, self.settings)

    def generate_and_sign(self, request: ContractRequest | dict[str, Any]) -> ContractResult:
        """
        Generate the signed contract for a player.

        Args:
            request: ContractRequest, or its dictionary form

        Returns:
            ContractResult with the stored document reference and renewal date

        Raises:
            InvalidContractRequest: If required inputs are missing or unusable
            PlayerNotFoundError: If the player does not exist
            ContractGenerationError: For any other failure
        """
        try:
            request = ContractRequest.model_validate(request)
        except ValidationError as e:
            logger.info("Rejected contract request: %s", e.errors())
            raise InvalidContractRequest() from e

        try:
            player = self.players.get_player(request.player_id)
            if player is None:
                raise PlayerNotFoundError(request.player_id)
            return self._generate(request, player)
        except ContractError:
            raise
        except Exception as e:
            logger.exception("Contract generation failed for player %s", request.player_id)
            raise ContractGenerationError() from e

    def _generate(self, request: ContractRequest, player: PlayerRecord) -> ContractResult:
        now = self.clock()
        # Shared by the storage key and the document id
        millis = int(now.timestamp() * 1000)

        template_key = self.config.CONTRACT_TEMPLATE_KEY.format(template_type=request.template_type.value)
        template_bytes = self.templates.get(template_key)
        if template_bytes is None:
            logger.warning("Template %s not found, generating on a blank page", template_key)
        regular_font = self.templates.get(self.config.CONTRACT_REGULAR_FONT_KEY)
        bold_font = self.templates.get(self.config.CONTRACT_BOLD_FONT_KEY)

        fields = ContractFields(
            legal_name=player.name or DEFAULT_PLAYER_NAME,
            id_number=request.dni,
            street=request.address.street,
            postal_code=request.address.cp,
            city=request.address.city,
            province=request.address.province,
            signature_date=format_spanish_date(now),
            birth_date=format_spanish_date(player.birth_date),
            nationality=player.nationality or "",
        )

        composed = compose_contract(
            template_bytes,
            decode_data_url(request.signature_base64),
            fields,
            regular_font_bytes=regular_font,
            bold_font_bytes=bold_font,
            settings=self.settings_for(request.template_type),
        )

        storage_key = self.config.CONTRACT_OUTPUT_KEY.format(
            player_id=request.player_id,
            millis=millis,
            stamp=now.strftime("%Y%m%d_%H%M%S"),
            year=now.year,
        )
        url = self.documents.put(storage_key, composed.document_bytes, "application/pdf")
        logger.info("Stored contract for player %s at %s", request.player_id, storage_key)

        agency_end_date = add_years(now.date(), self.config.CONTRACT_TERM_YEARS)
        document = ContractDocument(
            id=f"contract_{millis}",
            name=CONTRACT_DOCUMENT_NAME,
            url=url,
            date=now.isoformat(),
        )
        self.players.record_contract(
            request.player_id,
            document,
            agency_end_date,
            AgencyStatus.PENDING_VALIDATION,
        )

        return ContractResult(
            url=url,
            renewal_date=format_spanish_date(agency_end_date),
            storage_key=storage_key,
        )


def generate_and_sign_contract(
    request: ContractRequest | dict[str, Any],
    templates: BlobStore,
    documents: DocumentStore,
    players: PlayerRecords,
    settings: LayoutSettings | None = None,
) -> ContractResult:
    """
    Generate, store and record a signed contract in one call.

    Example:
        >>> result = generate_and_sign_contract(
        ...     {"player_id": "p1", "signature_base64": data_url, "dni": "12345678Z",
        ...      "address": {"street": "C/ Mayor 1", "cp": "08001", "city": "Barcelona",
        ...                  "province": "Barcelona"}},
        ...     templates=store, documents=store, players=records,
        ... )
        >>> print(result.url, result.renewal_date)
    """
    service = ContractService(templates, documents, players, settings=settings)
    return service.generate_and_sign(request)
