"""
Schemas module for data validation and structure definitions.
"""

from .base import AgencyStatus, TemplateType
from .contract import ComposedContract, ContractFields, ContractLayout, FilledField, LayoutBoxes
from .geometry import Placement, Point, Rect
from .request import Address, ContractDocument, ContractRequest, ContractResult, PlayerRecord

__all__ = [
    "AgencyStatus",
    "TemplateType",
    "ComposedContract",
    "ContractFields",
    "ContractLayout",
    "FilledField",
    "LayoutBoxes",
    "Placement",
    "Point",
    "Rect",
    "Address",
    "ContractDocument",
    "ContractRequest",
    "ContractResult",
    "PlayerRecord",
]
