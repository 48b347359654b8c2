from datetime import date, datetime
import pendulum


def to_pendulum_date(value:str|date|None = None) -> pendulum.Date:
    """
    Normalise a reference date to a pendulum Date. Falls back to today's local date.

    Args:
        value (str|date, optional): Date as 'YYYY-MM-DD', datetime/date object, or None for today.

    Returns:
        pendulum.Date: The reference date.
    """
    if value in ['None', None]:
        return pendulum.today().date()
    if isinstance(value, str):
        value = pendulum.parse(value)
    if isinstance(value, datetime):
        value = value.date()
    return pendulum.date(value.year, value.month, value.day)


def get_previous_days(reference_date:str|date|None = None) -> tuple[pendulum.Date, pendulum.Date]:
    """
    Gets yesterday and the day before yesterday relative to the reference date (today by default).

    Returns:
        tuple[pendulum.Date, pendulum.Date]: (yesterday, day before yesterday)
    """
    today = to_pendulum_date(reference_date)
    yesterday = today.subtract(days=1)
    return yesterday, yesterday.subtract(days=1)


def format_date_param(value:date) -> str:
    """Format a date as the ISO-8601 'YYYY-MM-DD' query string value."""
    return value.isoformat()
