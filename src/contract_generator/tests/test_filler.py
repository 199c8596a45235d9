import logging
from io import BytesIO

from PyPDF2 import PdfReader

from contract_generator.document.filler import fill_form
from contract_generator.document.fonts import Font, ResolvedFonts, resolve_fonts
from contract_generator.document.template import load_template
from contract_generator.schemas.contract import ContractFields
from contract_generator.tests.factories import CONTRACT_TEXT_FIELDS, make_template


def _fields(**overrides) -> ContractFields:
    values = dict(
        legal_name="maría gómez",
        id_number="12345678Z",
        street="C/ Mayor 1, 2º 3ª",
        postal_code="08001",
        city="Barcelona",
        province="Barcelona",
        signature_date="19/10/2026",
        birth_date="15/05/2005",
        nationality="Española",
    )
    values.update(overrides)
    return ContractFields(**values)


def test_legal_name_is_uppercased_in_bold():
    form = load_template(make_template(fields=CONTRACT_TEXT_FIELDS)).form
    fonts = resolve_fonts()

    filled = fill_form(form, _fields(), fonts)

    assert filled["nombre_jugador"].value == "MARÍA GÓMEZ"
    assert filled["nombre_jugador"].font_name == fonts.bold.name


def test_other_fields_keep_their_value_and_regular_font():
    form = load_template(make_template(fields=CONTRACT_TEXT_FIELDS)).form
    fonts = resolve_fonts()

    filled = fill_form(form, _fields(), fonts)

    assert filled["calle"].value == "C/ Mayor 1, 2º 3ª"
    assert filled["nacionalidad"].value == "Española"
    assert filled["fecha_nacimiento"].value == "15/05/2005"
    assert {f.font_name for name, f in filled.items() if name != "nombre_jugador"} == {fonts.regular.name}
    assert len(filled) == len(CONTRACT_TEXT_FIELDS)


def test_missing_template_fields_are_skipped():
    form = load_template(make_template(fields=[("nombre_jugador", 72, 700, 300, 20), ("dni", 72, 670, 150, 20)])).form

    filled = fill_form(form, _fields(), resolve_fonts())

    assert set(filled) == {"nombre_jugador", "dni"}
    assert filled["dni"].value == "12345678Z"


def test_unmapped_template_fields_are_left_alone():
    template = load_template(
        make_template(
            fields=[("dni", 72, 670, 150, 20), ("observaciones", 72, 500, 300, 20)],
            values={"observaciones": "CLAUSULA ESPECIAL"},
        )
    )

    filled = fill_form(template.form, _fields(), resolve_fonts())

    assert set(filled) == {"dni"}
    text = PdfReader(BytesIO(template.save())).pages[0].extract_text()
    assert "CLAUSULA ESPECIAL" in text
    assert "12345678Z" in text


def test_missing_optional_values_are_written_empty():
    form = load_template(make_template(fields=CONTRACT_TEXT_FIELDS)).form

    filled = fill_form(form, ContractFields(legal_name="Juan Prueba"), resolve_fonts())

    assert filled["nacionalidad"].value == ""
    assert filled["nombre_jugador"].value == "JUAN PRUEBA"


def test_appearance_failure_keeps_value(caplog):
    form = load_template(make_template(fields=CONTRACT_TEXT_FIELDS)).form
    fonts = ResolvedFonts(regular=Font("Helvetica"), bold=Font("No-Such-Font-Registered"))

    with caplog.at_level(logging.WARNING, logger="contract_generator.document.filler"):
        filled = fill_form(form, _fields(), fonts)

    assert filled["nombre_jugador"].value == "MARÍA GÓMEZ"
    assert filled["nombre_jugador"].font_name == "Helvetica"
    assert "Style update failed for 'nombre_jugador'" in caplog.text


def test_form_is_flattened_after_filling():
    form = load_template(make_template(fields=CONTRACT_TEXT_FIELDS)).form

    fill_form(form, _fields(), resolve_fonts())

    assert form.flattened
    assert form.try_get_field("nombre_jugador") is None
