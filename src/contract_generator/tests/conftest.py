from datetime import datetime
from pathlib import Path

import pytest
import reportlab

from contract_generator.document.layout import LayoutSettings
from contract_generator.tests.factories import (
    CONTRACT_TEXT_FIELDS,
    DATA_BOX,
    SIGNATURE_BOX,
    make_signature_png,
    make_template,
)


@pytest.fixture
def signature_png() -> bytes:
    return make_signature_png()


@pytest.fixture
def settings() -> LayoutSettings:
    return LayoutSettings()


@pytest.fixture
def contract_template() -> bytes:
    """Three pages, contract fields on the last one, no layout boxes."""
    return make_template(pages=3, fields=CONTRACT_TEXT_FIELDS)


@pytest.fixture
def boxed_template() -> bytes:
    """Two pages with contract fields plus signature and data boxes."""
    return make_template(pages=2, fields=CONTRACT_TEXT_FIELDS + [SIGNATURE_BOX, DATA_BOX])


@pytest.fixture
def vera_fonts() -> tuple[bytes, bytes]:
    """Regular and bold TrueType files bundled with reportlab."""
    fonts_dir = Path(reportlab.__file__).parent / "fonts"
    regular, bold = fonts_dir / "Vera.ttf", fonts_dir / "VeraBd.ttf"
    if not regular.exists() or not bold.exists():
        pytest.skip("reportlab bundled TrueType fonts not available")
    return regular.read_bytes(), bold.read_bytes()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 12, 30, 0)
