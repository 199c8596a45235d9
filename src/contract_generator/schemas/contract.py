"""
Schemas for the composition engine: the values written into a contract and
the finished document with its layout metadata.
"""

from pydantic import BaseModel, Field, field_validator

from .geometry import Placement, Point, Rect


class ContractFields(BaseModel):
    """
    Values written into the contract template.

    Only the legal name is required; templates are not guaranteed to expose
    a field for every value, and missing values are written as empty text.
    """

    legal_name: str = Field(..., description="Player's legal name (rendered upper-cased, bold)")
    id_number: str | None = Field(None, description="DNI/NIE or passport number")
    street: str | None = None
    postal_code: str | None = None
    city: str | None = None
    province: str | None = None
    signature_date: str | None = Field(None, description="Signing date, already formatted (dd/mm/yyyy)")
    birth_date: str | None = Field(None, description="Birth date, already formatted (dd/mm/yyyy)")
    nationality: str | None = None

    @field_validator("legal_name")
    @classmethod
    def _legal_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("legal_name must not be blank")
        return value


class FilledField(BaseModel):
    """A template field after its value was set, as it will be flattened."""
    name: str
    value: str
    font_name: str
    font_size: float | None = None


class LayoutBoxes(BaseModel):
    """Layout boxes read from the template form before it is flattened."""
    signature_box: Rect | None = None
    data_box: Rect | None = None


class ContractLayout(BaseModel):
    """
    Geometry decisions taken while composing a contract.

    Attributes:
        page_count: Number of pages in the output document
        lateral_signatures: Rotated signature marks, one per page except the last
        signature: Main signature placement on the last page
        text_origin: Baseline origin of the signer caption (name + DNI)
        boxes: Signature/data boxes found in the template form
        filled_fields: Template fields that received a value
        regular_font: Font name used for regular text
        bold_font: Font name used for bold text
    """
    page_count: int
    lateral_signatures: list[Placement] = Field(default_factory=list)
    signature: Placement
    text_origin: Point
    boxes: LayoutBoxes = Field(default_factory=LayoutBoxes)
    filled_fields: dict[str, FilledField] = Field(default_factory=dict)
    regular_font: str
    bold_font: str


class ComposedContract(BaseModel):
    """Finished contract document plus the layout it was composed with."""
    document_bytes: bytes
    layout: ContractLayout
