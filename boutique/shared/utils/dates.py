# boutique/shared/utils/dates.py
from datetime import date, datetime

LEGACY_DATE_FORMAT = "%d-%m-%Y"


def string_to_date(value: str) -> date:
    """Parse an ISO date (2023-01-31) or a legacy day-first date (31-01-2023)"""
    value = value.strip()
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.strptime(value, LEGACY_DATE_FORMAT).date()

