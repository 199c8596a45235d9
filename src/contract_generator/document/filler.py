"""
Filling of the contract form fields.
"""

import logging

from ..mappers.contract_fields import map_fields_to_template
from ..schemas.contract import ContractFields, FilledField
from .fonts import ResolvedFonts
from .form import Form

logger = logging.getLogger(__name__)


def fill_form(form: Form, fields: ContractFields, fonts: ResolvedFonts) -> dict[str, FilledField]:
    """
    Set the contract values on the template fields and flatten the form.

    Fields the template does not expose are skipped. A failure to compute a
    field's appearance keeps its value and renders it with the regular font.

    Args:
        form: Form of the template; flattened on return
        fields: Values to write
        fonts: Regular and bold fonts

    Returns:
        The filled fields by name, as they are rendered
    """
    filled: dict[str, FilledField] = {}
    total = len(form.fields)

    for value in map_fields_to_template(fields):
        form_field = form.try_get_field(value.field_name)
        if form_field is None:
            logger.debug("Template has no field '%s', skipping", value.field_name)
            continue
        if not form_field.is_text:
            logger.debug("Field '%s' is not a text field, skipping", value.field_name)
            continue

        font = fonts.bold if value.bold else fonts.regular
        form_field.set_text(value.text)
        try:
            form_field.update_appearance(font)
        except Exception as e:
            logger.warning("Style update failed for '%s': %s", value.field_name, e)

        filled[form_field.name] = FilledField(
            name=form_field.name,
            value=value.text,
            font_name=(form_field.font or fonts.regular).name,
            font_size=form_field.font_size,
        )

    form.flatten(fonts.regular)
    logger.info("Filled %d of %d template field(s)", len(filled), total)
    return filled
