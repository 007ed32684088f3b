from datetime import date, datetime
from typing import Any

# Formats seen in the Date field of the FamilyMenu feed, plus the one we send.
MENU_DATE_FORMATS = ("%m/%d/%Y", "%m-%d-%Y", "%m/%d/%Y %I:%M:%S %p", "%Y-%m-%d")


def format_api_params(params: dict[str, Any]) -> dict[str, Any]:
    """Drop unset values and convert dates to the API's m-d-Y format."""
    formatted = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, date):
            value = format_date(value)
        formatted[key] = value
    return formatted


def format_date(value: date) -> str:
    """Format a date as M-D-YYYY without zero padding (``1-9-2023``)."""
    return f"{value.month}-{value.day}-{value.year}"


def parse_menu_date(value: str | None) -> date | None:
    """Best-effort parse of an upstream date string. Returns None when nothing fits."""
    if not value:
        return None
    value = value.strip()
    for fmt in MENU_DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None
