# /lugyi_admin/models/announce_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AnnounceCreate(BaseModel):
    """
    Defines the contract for creating or fully replacing an announcement.
    The same model backs both POST and PUT, so an update must resend every
    required field.
    """
    title: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1)
    link: Optional[str] = Field(None, max_length=255)
    imgUrl: Optional[str] = None


class Announce(AnnounceCreate):
    """An announcement as stored in the database."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeleteResponse(BaseModel):
    message: str
