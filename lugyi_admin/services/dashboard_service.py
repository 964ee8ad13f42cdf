# /lugyi_admin/services/dashboard_service.py

"""
This service module builds the admin dashboard overview.

Each `get_*_stats` function assembles one section of the payload (users,
devices, content, subscriptions, views) from counts, a percentage change and
a time series. `get_overview` runs all five against a single resolved period
and a single reference time, so every section describes the same window.

All queries are read-only aggregates issued through the DatabaseService.
"""

import logging
from datetime import datetime
from typing import Optional, Union

from sqlalchemy.exc import SQLAlchemyError

from ..db.models.media_models import Content, ContentView, Device, Subscription, User
from ..models.dashboard_model import (
    ContentStats,
    DashboardMeta,
    DashboardOverview,
    DeviceStats,
    Period,
    SubscriptionStats,
    UserStats,
    ViewStats,
)
from .dashboard_helpers.aggregation import percentage_change, time_series, view_time_series
from .dashboard_helpers.date_ranges import day_bounds, resolve_period
from .dashboard_helpers.dialects import BucketDialect, get_dialect
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

POPULAR_CONTENT_LIMIT = 5


# --- Per-Domain Builders ---

def get_user_stats(db: DatabaseService, period: Period, now: datetime, dialect: BucketDialect) -> UserStats:
    return UserStats(
        total=db.count(User),
        change_percentage=percentage_change(db, User, period, now=now),
        chart=time_series(db, User, period, now=now, dialect=dialect),
    )


def get_device_stats(db: DatabaseService, period: Period, now: datetime, dialect: BucketDialect) -> DeviceStats:
    """Device counts, including devices active at any point today (server-local)."""
    start_of_day, end_of_day = day_bounds(now)
    return DeviceStats(
        total=db.count(Device),
        vip_devices=db.count(Device, Device.is_vip.is_(True)),
        daily_active=db.count(Device, Device.last_active_at.between(start_of_day, end_of_day)),
        change_percentage=percentage_change(db, Device, period, now=now),
        chart=time_series(db, Device, period, now=now, dialect=dialect),
    )


def get_content_stats(db: DatabaseService, period: Period, now: datetime, dialect: BucketDialect) -> ContentStats:
    popular = [
        {"id": row.id, "title": row.title, "views_count": row.views_count}
        for row in db.get_popular_content(limit=POPULAR_CONTENT_LIMIT)
    ]
    return ContentStats(
        total=db.count(Content),
        vip_content=db.count(Content, Content.is_vip.is_(True)),
        change_percentage=percentage_change(db, Content, period, now=now),
        popular_content=popular,
        chart=time_series(db, Content, period, now=now, dialect=dialect),
    )


def get_subscription_stats(db: DatabaseService, period: Period, now: datetime, dialect: BucketDialect) -> SubscriptionStats:
    return SubscriptionStats(
        total=db.count(Subscription),
        active=db.count(Subscription, Subscription.is_active.is_(True)),
        change_percentage=percentage_change(db, Subscription, period, now=now),
        chart=time_series(db, Subscription, period, now=now, dialect=dialect),
    )


def get_view_stats(db: DatabaseService, period: Period, now: datetime, dialect: BucketDialect) -> ViewStats:
    return ViewStats(
        total=db.count(ContentView),
        vip_views=db.count_vip_views(),
        change_percentage=percentage_change(db, ContentView, period, now=now),
        chart=view_time_series(db, period, now=now, dialect=dialect),
    )


# --- Core Public Function ---

def get_overview(
    db: DatabaseService,
    period: Union[Period, str] = Period.MONTH,
    now: Optional[datetime] = None,
    dialect: Optional[BucketDialect] = None,
) -> DashboardOverview:
    """
    Builds the full dashboard payload for one reporting period.

    Args:
        db: The DatabaseService for the current request.
        period: Reporting granularity. Anything outside day/week/month/year
            raises ValueError before a single query runs.
        now: Reference time for every window; defaults to the server clock.
        dialect: Bucketing strategy override; defaults to the one matching
            the bound database.

    Returns:
        A DashboardOverview with all five sections and the response metadata.
    """
    period = resolve_period(period)
    now = now or datetime.now()
    dialect = dialect or get_dialect(db.get_dialect_name())
    logger.info("Building dashboard overview for period=%s dialect=%s", period.value, dialect.name)

    try:
        return DashboardOverview(
            users=get_user_stats(db, period, now, dialect),
            devices=get_device_stats(db, period, now, dialect),
            content=get_content_stats(db, period, now, dialect),
            subscriptions=get_subscription_stats(db, period, now, dialect),
            views=get_view_stats(db, period, now, dialect),
            meta=DashboardMeta(time_range=period, last_updated=now.strftime("%Y-%m-%d %H:%M:%S")),
        )
    except SQLAlchemyError:
        logger.exception("Dashboard overview query failed for period=%s", period.value)
        # Re-raise so the router turns it into a 500 for the whole request.
        raise
