# /lugyi_admin/services/database_helpers/dashboard_repository_sql.py

"""
This module contains the raw SQLAlchemy queries behind the admin dashboard.

It is strictly a read path: every method here is an aggregate (a count, a
grouped count or a small ranked projection) and nothing is ever written.
Bucketing expressions are built by the caller, so this repository stays
ignorant of how each database formats dates.
"""

from datetime import datetime
from typing import List, Tuple

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from lugyi_admin.db.models.media_models import Content, ContentView


class DashboardRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    @property
    def dialect_name(self) -> str:
        """The SQLAlchemy dialect name of the bound engine, e.g. 'postgresql'."""
        return self.db.get_bind().dialect.name

    # --- Counts ---

    def count(self, model, *criteria) -> int:
        """Counts rows of `model`, optionally narrowed by SQLAlchemy filter criteria."""
        return self.db.query(model).filter(*criteria).count()

    def count_created_between(self, model, start: datetime, end: datetime, date_column: str = "created_at") -> int:
        """Counts rows whose `date_column` falls in the half-open window [start, end)."""
        column = getattr(model, date_column)
        return self.count(model, column >= start, column < end)

    def count_vip_views(self) -> int:
        """Counts views whose related content is flagged VIP."""
        return (
            self.db.query(ContentView)
            .join(Content, ContentView.content_id == Content.id)
            .filter(Content.is_vip.is_(True))
            .count()
        )

    # --- Grouped Aggregates ---

    def grouped_counts(self, model, bucket, start: datetime, end: datetime, date_column: str = "created_at") -> List[Tuple[str, int]]:
        """
        Returns (bucket_key, row_count) pairs for rows in [start, end),
        grouped and ordered by the given bucket expression.
        """
        column = getattr(model, date_column)
        rows = (
            self.db.query(bucket.label("bucket"), func.count().label("total"))
            .select_from(model)
            .filter(column >= start, column < end)
            .group_by(bucket)
            .order_by(bucket)
            .all()
        )
        return [(row.bucket, row.total) for row in rows]

    def grouped_view_counts(self, bucket, start: datetime, end: datetime) -> List[Tuple[str, int, int]]:
        """
        Returns (bucket_key, total_views, vip_views) triples for views in
        [start, end). The VIP sub-count comes from a conditional sum over the
        joined content row.
        """
        vip_flag = case((Content.is_vip.is_(True), 1), else_=0)
        rows = (
            self.db.query(
                bucket.label("bucket"),
                func.count(ContentView.id).label("total_views"),
                func.sum(vip_flag).label("vip_views"),
            )
            .select_from(ContentView)
            .join(Content, ContentView.content_id == Content.id)
            .filter(ContentView.created_at >= start, ContentView.created_at < end)
            .group_by(bucket)
            .order_by(bucket)
            .all()
        )
        return [(row.bucket, row.total_views, int(row.vip_views or 0)) for row in rows]

    # --- Rankings ---

    def get_popular_content(self, limit: int = 5) -> List[Content]:
        """Top content by the denormalized `views_count`, highest first."""
        return (
            self.db.query(Content.id, Content.title, Content.views_count)
            .order_by(Content.views_count.desc())
            .limit(limit)
            .all()
        )
