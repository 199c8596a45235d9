from io import BytesIO

import pytest
from PyPDF2 import PdfReader

from contract_generator import engine
from contract_generator.engine import compose_contract
from contract_generator.exceptions import (
    ContractGenerationError,
    InvalidSignatureError,
    TemplateParseError,
)
from contract_generator.schemas.contract import ContractFields
from contract_generator.schemas.geometry import Placement, Point, Rect
from contract_generator.tests.factories import make_template

FIELDS = ContractFields(
    legal_name="María Gómez",
    id_number="12345678Z",
    street="C/ Mayor 1",
    postal_code="08001",
    city="Barcelona",
    province="Barcelona",
    signature_date="19/10/2026",
    birth_date="15/05/2005",
    nationality="Española",
)


def _text(document_bytes: bytes) -> str:
    reader = PdfReader(BytesIO(document_bytes))
    return "\n".join(page.extract_text() for page in reader.pages)


def _has_widgets(document_bytes: bytes) -> bool:
    for page in PdfReader(BytesIO(document_bytes)).pages:
        annotations = page.get("/Annots")
        for annotation in annotations.get_object() if annotations else []:
            if annotation.get_object().get("/Subtype") == "/Widget":
                return True
    return False


def test_same_inputs_give_same_layout(contract_template, signature_png):
    first = compose_contract(contract_template, signature_png, FIELDS)
    second = compose_contract(contract_template, signature_png, FIELDS)

    assert first.layout.signature == second.layout.signature
    assert first.layout.lateral_signatures == second.layout.lateral_signatures
    assert first.layout.text_origin == second.layout.text_origin


def test_template_without_boxes_uses_fixed_position(contract_template, signature_png):
    composed = compose_contract(contract_template, signature_png, FIELDS)
    signature = composed.layout.signature

    assert (signature.x, signature.y) == (310, 450)
    assert signature.width == pytest.approx(160 * 0.6)
    assert signature.height == pytest.approx(80 * 0.6)
    assert composed.layout.boxes.signature_box is None
    assert composed.layout.text_origin == Point(310, 430)


def test_lateral_signature_on_every_page_but_last(contract_template, signature_png):
    composed = compose_contract(contract_template, signature_png, FIELDS)
    lateral = composed.layout.lateral_signatures

    assert composed.layout.page_count == 3
    assert len(lateral) == 2
    assert all(placement.rotation == 90 for placement in lateral)
    assert lateral[0] == Placement(45, 100, 80, 40, rotation=90)


def test_fields_are_filled_and_form_flattened(contract_template, signature_png):
    composed = compose_contract(contract_template, signature_png, FIELDS)

    filled = composed.layout.filled_fields
    assert filled["nombre_jugador"].value == "MARÍA GÓMEZ"
    assert filled["nombre_jugador"].font_name == "Helvetica-Bold"
    assert filled["dni"].value == "12345678Z"

    assert len(PdfReader(BytesIO(composed.document_bytes)).pages) == 3
    assert not _has_widgets(composed.document_bytes)
    text = _text(composed.document_bytes)
    assert "12345678Z" in text
    assert "Barcelona" in text


def test_boxes_drive_signature_and_caption(boxed_template, signature_png):
    composed = compose_contract(boxed_template, signature_png, FIELDS)
    layout = composed.layout

    assert layout.boxes.signature_box == Rect(100, 300, 80, 40)
    assert layout.boxes.data_box == Rect(300, 200, 150, 50)
    # 2:1 image fills the 80x40 box, then the box correction moves it down
    assert layout.signature == Placement(100, 180, 80, 40)
    assert layout.text_origin == Point(300, 120)
    assert "box_firma" not in layout.filled_fields
    assert not _has_widgets(composed.document_bytes)


def test_blank_template_fallback(signature_png):
    composed = compose_contract(None, signature_png, FIELDS)

    reader = PdfReader(BytesIO(composed.document_bytes))
    assert len(reader.pages) == 1
    assert composed.layout.page_count == 1
    assert composed.layout.lateral_signatures == []
    assert composed.layout.filled_fields == {}
    assert (composed.layout.signature.x, composed.layout.signature.y) == (310, 450)
    assert "DNI: 12345678Z" in _text(composed.document_bytes)


def test_template_without_form_fields(signature_png):
    composed = compose_contract(make_template(pages=2), signature_png, FIELDS)

    assert composed.layout.page_count == 2
    assert len(composed.layout.lateral_signatures) == 1
    assert composed.layout.filled_fields == {}


def test_caption_without_id_number(signature_png):
    composed = compose_contract(None, signature_png, ContractFields(legal_name="Juan Prueba"))

    text = _text(composed.document_bytes)
    assert "Juan Prueba" in text
    assert "DNI:" not in text


def test_custom_fonts_are_reported(contract_template, signature_png, vera_fonts):
    regular, bold = vera_fonts

    composed = compose_contract(contract_template, signature_png, FIELDS, regular, bold)

    assert composed.layout.regular_font.startswith("Contract-")
    assert composed.layout.bold_font.startswith("Contract-")
    assert composed.layout.filled_fields["nombre_jugador"].font_name == composed.layout.bold_font


@pytest.mark.parametrize("signature", [b"", b"not an image at all"])
def test_invalid_signature_is_rejected(contract_template, signature):
    with pytest.raises(InvalidSignatureError) as excinfo:
        compose_contract(contract_template, signature, FIELDS)
    assert excinfo.value.code == "invalid-argument"


def test_corrupt_template_is_reported_generically(signature_png):
    with pytest.raises(TemplateParseError) as excinfo:
        compose_contract(b"%PDF-1.7\nnot really", signature_png, FIELDS)

    assert str(excinfo.value) == "Failed to generate contract."
    assert excinfo.value.detail


def test_unexpected_failure_is_wrapped(contract_template, signature_png, monkeypatch, caplog):
    def _boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(engine, "fill_form", _boom)

    with pytest.raises(ContractGenerationError) as excinfo:
        compose_contract(contract_template, signature_png, FIELDS)

    assert "boom" not in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "Contract composition failed" in caplog.text


def test_prefilled_template_content_survives(signature_png):
    template = make_template(
        fields=[("dni", 72, 670, 150, 20), ("clausula", 72, 400, 400, 20)],
        values={"clausula": "CLAUSULA ESPECIAL"},
    )

    composed = compose_contract(template, signature_png, ContractFields(legal_name="a", id_number="X1"))

    text = _text(composed.document_bytes)
    assert "CLAUSULA ESPECIAL" in text
    assert "X1" in text
    assert not _has_widgets(composed.document_bytes)
