# /lugyi_admin/routers/announces_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import announce_model
from ..services import announce_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


def _not_found(announce_id: int) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Announce with ID {announce_id} not found")


@router.get("", response_model=List[announce_model.Announce], summary="List All Announcements")
def list_announces(db: DatabaseService = Depends(get_db_service)):
    return announce_service.list_announces(db=db)


@router.post("", response_model=announce_model.Announce, status_code=status.HTTP_201_CREATED, summary="Create an Announcement")
def create_announce(payload: announce_model.AnnounceCreate, db: DatabaseService = Depends(get_db_service)):
    return announce_service.create_announce(db=db, payload=payload)


@router.get("/{announce_id}", response_model=announce_model.Announce, summary="Get a Single Announcement")
def get_announce(announce_id: int, db: DatabaseService = Depends(get_db_service)):
    announce = announce_service.get_announce(db=db, announce_id=announce_id)
    if announce is None:
        raise _not_found(announce_id)
    return announce


@router.put("/{announce_id}", response_model=announce_model.Announce, summary="Update an Announcement")
def update_announce(announce_id: int, payload: announce_model.AnnounceCreate, db: DatabaseService = Depends(get_db_service)):
    updated = announce_service.update_announce(db=db, announce_id=announce_id, payload=payload)
    if updated is None:
        raise _not_found(announce_id)
    return updated


@router.delete("/{announce_id}", response_model=announce_model.DeleteResponse, summary="Delete an Announcement")
def delete_announce(announce_id: int, db: DatabaseService = Depends(get_db_service)):
    was_deleted = announce_service.delete_announce(db=db, announce_id=announce_id)
    if not was_deleted:
        raise _not_found(announce_id)
    return {"message": "Deleted successfully"}
