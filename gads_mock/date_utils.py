from datetime import date, timedelta
from typing import List

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str) -> date:
    return date.fromisoformat(value)


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def expand_date_range(start_date: str, end_date: str) -> List[str]:
    """Inclusive list of YYYY-MM-DD strings from start_date to end_date."""
    start = parse_date(start_date)
    end = parse_date(end_date)
    days = (end - start).days
    return [format_date(start + timedelta(days=i)) for i in range(days + 1)]


def day_of_week(value: str) -> int:
    """Weekday of a YYYY-MM-DD string (Mon=0 ... Sun=6)."""
    return parse_date(value).weekday()
