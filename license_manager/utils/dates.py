from datetime import date, datetime

from dateutil import tz
from dateutil.relativedelta import relativedelta


def add_months(d: date, months: int) -> date:
    """
    Same day N months later; clamps to the last day of the target month
    (2026-10-31 + 4 -> 2027-02-28).
    """
    return d + relativedelta(months=+months)


def today_in(tz_name: str) -> date:
    """Calendar date in the given IANA zone, e.g. the scheduler's."""
    zone = tz.gettz(tz_name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {tz_name}")
    return datetime.now(zone).date()


def format_date(d) -> str:
    return d.strftime("%Y-%m-%d") if d else "N/A"
