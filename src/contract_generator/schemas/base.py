"""
Base enums shared across the contract generator.
"""

from enum import Enum


class TemplateType(str, Enum):
    """Contract template variants kept in template storage."""
    ADULT = "adult"
    MINOR = "minor"


class AgencyStatus(str, Enum):
    """Status flag written to the player record after signing."""
    PENDING_VALIDATION = "PendingValidation"
