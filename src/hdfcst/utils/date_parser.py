"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil.relativedelta import relativedelta

STATEMENT_DATE_FORMAT = "%d/%m/%Y"
USER_DATE_FORMAT = "%d/%m/%Y"
CENTURY = "20"


def expand_year(token: str) -> str:
    """Expand a ``DD/MM/YY`` token into ``DD/MM/20YY``.

    The century is fixed; ``"05/03/99"`` becomes ``"05/03/2099"``.

    Raises:
        ValueError: If the token has fewer than three slash-separated parts
    """
    parts = token.split("/")
    if len(parts) < 3:
        raise ValueError(f"Could not parse date '{token}': expected DD/MM/YY")
    return f"{parts[0]}/{parts[1]}/{CENTURY}{parts[2]}"


def parse_statement_date(token: str) -> tuple[date, str]:
    """Parse a statement date column.

    Args:
        token: Date as written in the statement (``DD/MM/YY``)

    Returns:
        Tuple of (date, normalized ``DD/MM/YYYY`` display string)

    Raises:
        ValueError: If the token is not a valid calendar date
    """
    display = expand_year(token.strip())
    try:
        parsed = datetime.strptime(display, STATEMENT_DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"Could not parse date '{display}': {e}")
    return parsed, display


def parse_date(date_str: str) -> date:
    """Parse a date given on the command line.

    Supports:
    - Day-first dates with a four-digit year: "05/03/2023", "5/3/2023"
    - Relative dates: "today", "yesterday", "tomorrow"
    - Period starts: "this week", "this month", "this year", "last week",
      "last month", "last year"

    Anything else, including "2023-03-05" or "05/03", is rejected rather
    than guessed.

    Args:
        date_str: Date string

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "this week": today - timedelta(days=today.weekday()),
        "this month": today.replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last week": today - timedelta(days=today.weekday() + 7),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return datetime.strptime(date_str, USER_DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"Could not parse date '{date_str}': expected DD/MM/YYYY ({e})")
