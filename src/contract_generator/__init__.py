"""
Contract Generator

This module composes signed agency contracts: it fills the named fields of a
PDF template, stamps the player's handwritten signature on every page and
places the main signature inside the template's signature box.

Usage:
    # Compose a document directly
    from contract_generator import ContractFields, compose_contract

    composed = compose_contract(
        template_bytes=open("contract_adult.pdf", "rb").read(),
        signature_image_bytes=open("firma.png", "rb").read(),
        fields=ContractFields(legal_name="María Gómez", id_number="12345678Z"),
    )
    open("contract.pdf", "wb").write(composed.document_bytes)
    print(composed.layout.signature)

    # Generate, store and record a contract
    from contract_generator import ContractService, LocalBlobStore

    store = LocalBlobStore("storage")
    service = ContractService(templates=store, documents=store, players=records)
    result = service.generate_and_sign(request)
"""

from .document.layout import LayoutSettings
from .engine import compose_contract
from .exceptions import (
    ContractError,
    ContractGenerationError,
    InvalidContractRequest,
    InvalidSignatureError,
    PlayerNotFoundError,
    TemplateParseError,
)
from .main import ContractService, generate_and_sign_contract
from .schemas.contract import ComposedContract, ContractFields, ContractLayout
from .schemas.request import ContractRequest, ContractResult, PlayerRecord
from .storage.local import LocalBlobStore
from .storage.memory import InMemoryBlobStore, InMemoryPlayerRecords

__all__ = [
    # Composition
    "compose_contract",
    "LayoutSettings",
    "ComposedContract",
    "ContractFields",
    "ContractLayout",
    # Signing service
    "ContractService",
    "generate_and_sign_contract",
    "ContractRequest",
    "ContractResult",
    "PlayerRecord",
    "LocalBlobStore",
    "InMemoryBlobStore",
    "InMemoryPlayerRecords",
    # Errors
    "ContractError",
    "ContractGenerationError",
    "InvalidContractRequest",
    "InvalidSignatureError",
    "PlayerNotFoundError",
    "TemplateParseError",
]
