# /lugyi_admin/services/dashboard_helpers/date_ranges.py

"""
Reporting-window arithmetic for the dashboard.

A window is always anchored on a reference time `now`: the *current* window
is the last full unit up to `now`, and the *previous* window is the unit
immediately before it, so the two are adjacent and of equal calendar length.

Month and year steps use calendar arithmetic (via `pandas.DateOffset`), which
clamps to the last valid day: 31 March minus one month is the last day of
February, not 3 March.
"""

from datetime import datetime, time
from typing import Optional, Tuple, Union

import pandas as pd

from ...models.dashboard_model import Period

# The DateOffset keyword that expresses one reporting unit.
_PERIOD_UNITS = {
    Period.DAY: "days",
    Period.WEEK: "weeks",
    Period.MONTH: "months",
    Period.YEAR: "years",
}


def resolve_period(period: Union[Period, str]) -> Period:
    """
    Coerces a raw value into a Period. Unknown values raise ValueError.
    """
    return period if isinstance(period, Period) else Period(period)


def shift(moment: datetime, period: Union[Period, str], units: int = 1) -> datetime:
    """Returns `moment` moved back by `units` reporting units."""
    # A single N-unit offset, so month-end clamping happens once.
    offset = pd.DateOffset(**{_PERIOD_UNITS[resolve_period(period)]: units})
    return (pd.Timestamp(moment) - offset).to_pydatetime()


def compute_range(
    period: Union[Period, str],
    previous: bool = False,
    now: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """
    Returns the (start, end) boundaries of the current or previous window.

    Current window:  [now - 1 unit, now)
    Previous window: [start - 1 unit, start), where start = now - 1 unit

    Stepping back from the current start keeps both windows exactly one unit
    long when month-end clamping applies (31 March: current starts 29 February,
    previous starts 29 January).
    """
    now = now or datetime.now()
    current_start = shift(now, period)
    if previous:
        return shift(current_start, period), current_start
    return current_start, now


def day_bounds(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """Start and end (inclusive, to the microsecond) of the calendar day containing `now`."""
    today = (now or datetime.now()).date()
    return datetime.combine(today, time.min), datetime.combine(today, time.max)
