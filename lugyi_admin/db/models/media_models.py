# /lugyi_admin/db/models/media_models.py

"""
This module defines the SQLAlchemy ORM models for the platform entities the
admin dashboard reports on: `User`, `Device`, `Content`, `ContentView` and
`Subscription`.

The dashboard only ever reads these tables. Their lifecycle belongs to the
mobile/content side of the platform, so no relationship here cascades.
"""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..base_class import Base


class User(Base):
    """SQLAlchemy model representing a registered app user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, index=True, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), index=True, nullable=False)


class Device(Base):
    """
    SQLAlchemy model representing an installed client device.

    `last_active_at` is refreshed by the client on every session and is what
    the "daily active devices" metric is computed from.
    """
    __tablename__ = "devices"

    id = Column(Integer, primary_key=True, index=True)
    device_id = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, unique=True, nullable=True)
    is_vip = Column(Boolean, default=False, nullable=False)
    last_active_at = Column(DateTime, nullable=True, index=True)
    created_at = Column(DateTime, server_default=func.now(), index=True, nullable=False)


class Content(Base):
    """
    SQLAlchemy model representing a piece of published media content.

    `views_count` is a denormalized counter maintained by the content service;
    the dashboard ranks "popular" content by it rather than counting views.
    """
    __tablename__ = "contents"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    # The column keeps its historical name `isvip`.
    is_vip = Column("isvip", Boolean, default=False, nullable=False)
    views_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), index=True, nullable=False)

    views = relationship("ContentView", back_populates="content")


class ContentView(Base):
    """SQLAlchemy model representing a single view of a Content item."""
    __tablename__ = "content_views"

    id = Column(Integer, primary_key=True, index=True)
    content_id = Column(Integer, ForeignKey("contents.id"), nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now(), index=True, nullable=False)

    content = relationship("Content", back_populates="views")


class Subscription(Base):
    """SQLAlchemy model representing a (possibly lapsed) paid subscription."""
    __tablename__ = "subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), index=True, nullable=False)
