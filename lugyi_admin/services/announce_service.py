# /lugyi_admin/services/announce_service.py

"""
Business logic for in-app announcements. A thin layer: validation already
happened in the Pydantic models, so these functions shape records and
delegate persistence to the DatabaseService.
"""

import logging
from typing import List, Optional

from ..models.announce_model import Announce, AnnounceCreate
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def list_announces(db: DatabaseService) -> List[Announce]:
    return [Announce.model_validate(obj) for obj in db.get_all_announces()]


def get_announce(db: DatabaseService, announce_id: int) -> Optional[Announce]:
    obj = db.get_announce_by_id(announce_id)
    return Announce.model_validate(obj) if obj else None


def create_announce(db: DatabaseService, payload: AnnounceCreate) -> Announce:
    new_obj = db.add_announce(payload.model_dump())
    logger.info("Created announce id=%s category=%s", new_obj.id, new_obj.category)
    return Announce.model_validate(new_obj)


def update_announce(db: DatabaseService, announce_id: int, payload: AnnounceCreate) -> Optional[Announce]:
    """Replaces every field of an announcement; returns None if it does not exist."""
    updated = db.update_announce(announce_id, payload.model_dump())
    if updated is None:
        return None
    logger.info("Updated announce id=%s", announce_id)
    return Announce.model_validate(updated)


def delete_announce(db: DatabaseService, announce_id: int) -> bool:
    was_deleted = db.delete_announce(announce_id)
    if was_deleted:
        logger.info("Deleted announce id=%s", announce_id)
    return was_deleted
