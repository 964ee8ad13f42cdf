# /lugyi_admin/services/dashboard_helpers/aggregation.py

"""
Shared aggregates used by every dashboard section: the period-over-period
percentage change and the bucketed time series.

Both are computed against the *current* reporting window anchored on `now`;
percentage change additionally looks at the window just before it.
"""

from datetime import datetime
from typing import Dict, List, Optional, Union

from ...db.models.media_models import ContentView
from ...models.dashboard_model import Period
from ..database_service import DatabaseService
from .date_ranges import compute_range
from .dialects import BucketDialect, format_label, get_dialect


def compute_change(current: int, previous: int) -> float:
    """
    Percentage change from `previous` to `current`, rounded to 2 places.
    Growth from zero is reported as a flat 100.0; zero to zero is 0.0.
    """
    if previous == 0:
        return 100.0 if current > 0 else 0.0
    return round((current - previous) / previous * 100, 2)


def percentage_change(db: DatabaseService, model, period: Union[Period, str], now: Optional[datetime] = None) -> float:
    now = now or datetime.now()
    current_count = db.count_created_between(model, *compute_range(period, now=now))
    previous_count = db.count_created_between(model, *compute_range(period, previous=True, now=now))
    return compute_change(current_count, previous_count)


def _resolve_dialect(db: DatabaseService, dialect: Optional[BucketDialect]) -> BucketDialect:
    return dialect or get_dialect(db.get_dialect_name())


def time_series(
    db: DatabaseService,
    model,
    period: Union[Period, str],
    now: Optional[datetime] = None,
    date_column: str = "created_at",
    dialect: Optional[BucketDialect] = None,
) -> List[Dict]:
    """
    Row counts per bucket over the current window, ordered by bucket key.
    Buckets without rows are not returned.
    """
    bucket = _resolve_dialect(db, dialect).bucket_expression(getattr(model, date_column), period)
    start, end = compute_range(period, now=now)
    return [
        {"date": format_label(key, period), "count": count}
        for key, count in db.get_grouped_counts(model, bucket, start, end, date_column)
    ]


def view_time_series(
    db: DatabaseService,
    period: Union[Period, str],
    now: Optional[datetime] = None,
    dialect: Optional[BucketDialect] = None,
) -> List[Dict]:
    """Like `time_series` for content views, with a VIP sub-count per bucket."""
    bucket = _resolve_dialect(db, dialect).bucket_expression(ContentView.created_at, period)
    start, end = compute_range(period, now=now)
    return [
        {"date": format_label(key, period), "total_views": total, "vip_views": vip}
        for key, total, vip in db.get_grouped_view_counts(bucket, start, end)
    ]
