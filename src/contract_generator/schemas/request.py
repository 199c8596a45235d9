"""
Schemas for the signing service: the request sent by the player portal, the
player record it reads and the result it returns.
"""

from datetime import date

from pydantic import BaseModel, Field

from .base import AgencyStatus, TemplateType


class Address(BaseModel):
    """Postal address typed in by the player when signing."""
    street: str = Field(..., min_length=1)
    cp: str = Field(..., min_length=1, description="Postal code")
    city: str = Field(..., min_length=1)
    province: str = Field(..., min_length=1)


class ContractRequest(BaseModel):
    """
    Request to generate and sign an agency contract.

    Attributes:
        player_id: Identifier of the player record
        signature_base64: Signature PNG as a data URL or bare base64 string
        dni: Identity document number
        address: Player address
        template_type: Which contract template to use
    """
    player_id: str = Field(..., min_length=1)
    signature_base64: str = Field(..., min_length=1)
    dni: str = Field(..., min_length=1)
    address: Address
    template_type: TemplateType = TemplateType.ADULT


class PlayerRecord(BaseModel):
    """The subset of the player record the contract needs."""
    id: str
    name: str | None = None
    birth_date: date | None = None
    nationality: str | None = None


class ContractDocument(BaseModel):
    """Document entry appended to the player's document list."""
    id: str
    name: str
    type: str = "contract"
    url: str
    date: str


class ContractResult(BaseModel):
    """Result returned to the caller after a successful signing."""
    success: bool = True
    url: str
    renewal_date: str
    storage_key: str
    status: AgencyStatus = AgencyStatus.PENDING_VALIDATION
