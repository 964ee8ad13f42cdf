# /lugyi_admin/services/database_service.py

from datetime import datetime
from typing import Dict, Generator, List, Optional, Tuple

from fastapi import Depends
from sqlalchemy.orm import Session

# --- Core Database Setup ---
from lugyi_admin.db.database import get_db

# --- Repository Imports ---
from .database_helpers.announce_repository_sql import AnnounceRepositorySQL
from .database_helpers.dashboard_repository_sql import DashboardRepositorySQL


class DatabaseService:
    """
    Single entry point to the persistence layer. Services talk to this facade
    and never to a SQLAlchemy session directly.
    """

    def __init__(self, db_session: Session):
        if db_session is None:
            raise ValueError("A database session is required.")
        self.announce_repo = AnnounceRepositorySQL(db_session)
        self.dashboard_repo = DashboardRepositorySQL(db_session)

    # --- ANNOUNCEMENT METHODS (DELEGATED) ---
    def get_all_announces(self) -> List: return self.announce_repo.get_all_announces()
    def get_announce_by_id(self, announce_id: int) -> Optional[object]: return self.announce_repo.get_announce_by_id(announce_id)
    def add_announce(self, record: Dict): return self.announce_repo.add_announce(record)
    def update_announce(self, announce_id: int, data: Dict): return self.announce_repo.update_announce(announce_id, data)
    def delete_announce(self, announce_id: int) -> bool: return self.announce_repo.delete_announce(announce_id)

    # --- DASHBOARD METHODS (DELEGATED, READ-ONLY) ---
    def get_dialect_name(self) -> str: return self.dashboard_repo.dialect_name
    def count(self, model, *criteria) -> int: return self.dashboard_repo.count(model, *criteria)
    def count_created_between(self, model, start: datetime, end: datetime, date_column: str = "created_at") -> int:
        return self.dashboard_repo.count_created_between(model, start, end, date_column)
    def count_vip_views(self) -> int: return self.dashboard_repo.count_vip_views()
    def get_grouped_counts(self, model, bucket, start: datetime, end: datetime, date_column: str = "created_at") -> List[Tuple[str, int]]:
        return self.dashboard_repo.grouped_counts(model, bucket, start, end, date_column)
    def get_grouped_view_counts(self, bucket, start: datetime, end: datetime) -> List[Tuple[str, int, int]]:
        return self.dashboard_repo.grouped_view_counts(bucket, start, end)
    def get_popular_content(self, limit: int = 5) -> List: return self.dashboard_repo.get_popular_content(limit)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
