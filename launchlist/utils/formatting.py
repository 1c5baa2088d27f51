"""Status and time formatting for launches."""

from datetime import datetime, timedelta
from typing import Tuple

from launchlist.core.models import Launch

STATUS_UPCOMING = "Upcoming"
STATUS_SUCCESS = "Success"
STATUS_FAILED = "Failed"

_HOUR = timedelta(hours=1)


def launch_status(launch: Launch) -> str:
    if launch.is_upcoming:
        return STATUS_UPCOMING
    return STATUS_SUCCESS if launch.was_successful else STATUS_FAILED


def relative_age(now: datetime, date_utc: datetime) -> Tuple[int, str]:
    """Return how long ago ``date_utc`` was as ``(amount, unit)``.

    Whole hours are floored first, then days from hours and years from
    days (365 days per year), so nothing is ever rounded up. Launches in
    the future give negative hours.
    """
    hours = (now - date_utc) // _HOUR
    days = hours // 24
    years = days // 365

    if years > 0:
        return years, "years"
    elif days > 0:
        return days, "days"
    else:
        return hours, "hours"


def format_relative_age(now: datetime, date_utc: datetime) -> str:
    amount, unit = relative_age(now, date_utc)
    return f"{amount} {unit} ago"
