"""
Date helpers for contract values.
"""

from datetime import date, datetime


def format_spanish_date(value: date | datetime | str | None) -> str:
    """
    Format a date as ``dd/mm/yyyy``.

    ISO strings (``YYYY-MM-DD``, optionally with a time part) are parsed
    first; other strings are returned unchanged.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value.strftime("%d/%m/%Y")


def add_years(value: date, years: int) -> date:
    """Add calendar years; 29 February maps to 28 February in non-leap years."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)
