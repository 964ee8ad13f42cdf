# /lugyi_admin/db/models/announce_models.py

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from ..base_class import Base


class Announce(Base):
    """SQLAlchemy model for an in-app announcement banner."""
    __tablename__ = "announces"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    category = Column(String, nullable=False, index=True)
    link = Column(String(255), nullable=True)
    # camelCase is part of the public API contract used by the mobile clients.
    imgUrl = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
