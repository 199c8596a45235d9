"""
Configuration module for the Contract Generator.
Loads environment variables and provides configuration settings.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from the contract_generator directory
BASE_DIR = Path(__file__).resolve().parent
load_dotenv(BASE_DIR / ".env")


def _float_env(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


class Config:
    """Configuration settings for the contract generator."""

    # Storage keys
    CONTRACT_TEMPLATE_KEY: str = os.getenv(
        "CONTRACT_TEMPLATE_KEY", "templates/contract_{template_type}.pdf"
    )
    CONTRACT_REGULAR_FONT_KEY: str = os.getenv("CONTRACT_REGULAR_FONT_KEY", "templates/calibri.ttf")
    CONTRACT_BOLD_FONT_KEY: str = os.getenv("CONTRACT_BOLD_FONT_KEY", "templates/calibrib.ttf")
    CONTRACT_OUTPUT_KEY: str = os.getenv(
        "CONTRACT_OUTPUT_KEY", "players/{player_id}/documents/Contrato_Agencia_{millis}.pdf"
    )
    CONTRACT_STORAGE_ROOT: str = os.getenv("CONTRACT_STORAGE_ROOT", str(BASE_DIR.parent.parent / "storage"))

    # Agency contract term used for the renewal date
    CONTRACT_TERM_YEARS: int = int(os.getenv("CONTRACT_TERM_YEARS", "2"))

    # Special form fields carrying layout intent
    SIGNATURE_BOX_FIELD: str = os.getenv("CONTRACT_SIGNATURE_BOX_FIELD", "box_firma")
    DATA_BOX_FIELD: str = os.getenv("CONTRACT_DATA_BOX_FIELD", "box_datos")

    # Lateral signature drawn on every page but the last
    LATERAL_SCALE: float = _float_env("CONTRACT_LATERAL_SCALE", 0.5)
    LATERAL_X: float = _float_env("CONTRACT_LATERAL_X", 45)
    LATERAL_Y: float = _float_env("CONTRACT_LATERAL_Y", 100)

    # Main signature on the last page
    MAIN_SCALE: float = _float_env("CONTRACT_MAIN_SCALE", 0.6)
    DEFAULT_SIGNATURE_X: float = _float_env("CONTRACT_DEFAULT_SIGNATURE_X", 310)
    DEFAULT_SIGNATURE_Y: float = _float_env("CONTRACT_DEFAULT_SIGNATURE_Y", 450)

    # Calibration of box coordinates against the page (template specific)
    SIGNATURE_BOX_CORRECTION: float = _float_env("CONTRACT_SIGNATURE_BOX_CORRECTION", -120)
    DATA_BOX_CORRECTION: float = _float_env("CONTRACT_DATA_BOX_CORRECTION", -120)
    DATA_BOX_TOP_INSET: float = _float_env("CONTRACT_DATA_BOX_TOP_INSET", 10)
    TEXT_GAP: float = _float_env("CONTRACT_TEXT_GAP", 20)

    # Signer caption (name + DNI) under the signature
    CAPTION_FONT_SIZE: float = _float_env("CONTRACT_CAPTION_FONT_SIZE", 10)
    CAPTION_LINE_SPACING: float = _float_env("CONTRACT_CAPTION_LINE_SPACING", 12)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate that the configured values are usable."""
        for name in ("LATERAL_SCALE", "MAIN_SCALE", "CAPTION_FONT_SIZE"):
            if getattr(cls, name) <= 0:
                raise ValueError(f"{name} must be a positive number")
        if cls.CONTRACT_TERM_YEARS < 0:
            raise ValueError("CONTRACT_TERM_YEARS must not be negative")


config = Config()
