"""
Mapper from ContractFields to the text fields of the contract templates.
"""

from dataclasses import dataclass

from ..schemas.contract import ContractFields

# Semantic key -> form field name used by the agency templates
CONTRACT_FIELD_NAMES: dict[str, str] = {
    "legal_name": "nombre_jugador",
    "id_number": "dni",
    "street": "calle",
    "postal_code": "cp",
    "city": "ciudad",
    "province": "provincia",
    "signature_date": "fecha_firma",
    "birth_date": "fecha_nacimiento",
    "nationality": "nacionalidad",
}

# Keys rendered upper-cased with the bold font
EMPHASIZED_KEYS = frozenset({"legal_name"})


@dataclass(frozen=True)
class TemplateValue:
    """Text for one template field and whether it uses the bold font."""

    field_name: str
    text: str
    bold: bool = False


def map_fields_to_template(fields: ContractFields) -> list[TemplateValue]:
    """
    Build the template values for ``fields``.

    Missing optional values become empty text so stale template content is
    cleared.
    """
    values = []
    for key, field_name in CONTRACT_FIELD_NAMES.items():
        text = getattr(fields, key) or ""
        if key in EMPHASIZED_KEYS:
            values.append(TemplateValue(field_name, text.upper(), bold=True))
        else:
            values.append(TemplateValue(field_name, text))
    return values
