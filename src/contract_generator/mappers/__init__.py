"""
Mappers to transform contract data into template field values.
"""

from .contract_fields import CONTRACT_FIELD_NAMES, TemplateValue, map_fields_to_template

__all__ = ["CONTRACT_FIELD_NAMES", "TemplateValue", "map_fields_to_template"]
