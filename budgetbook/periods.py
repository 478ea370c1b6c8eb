from datetime import date, datetime

from .errors import InvalidInput


def is_month_key(value) -> bool:
    return isinstance(value, str) and len(value) == 7 and value[4] == "-"


def parse_month(value) -> date:
    """Return the first day of a YYYY-MM month key."""
    if not is_month_key(value):
        raise InvalidInput("Invalid month format. Expected YYYY-MM")
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise InvalidInput("Invalid month format. Expected YYYY-MM")


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def current_month() -> str:
    return month_key(date.today())


def _shift(value, delta):
    first = parse_month(value)
    index = first.year * 12 + first.month - 1 + delta
    return date(index // 12, index % 12 + 1, 1)


def previous_month(value) -> str:
    return month_key(_shift(value, -1))


def next_month(value) -> str:
    return month_key(_shift(value, 1))


def month_bounds(value):
    """Half-open [start, end) date range covering the month."""
    return parse_month(value), _shift(value, 1)


def month_display(value) -> str:
    return parse_month(value).strftime("%B %Y")


def parse_date(value) -> date:
    try:
        return datetime.strptime(str(value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidInput("Invalid date format, expected YYYY-MM-DD")


def date_display(day: date) -> str:
    # Same shape as strftime's %e: day padded with a space
    return f"{day.day:>2} {day.strftime('%b %Y')}"
