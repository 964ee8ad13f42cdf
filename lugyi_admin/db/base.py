# /lugyi_admin/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# By importing them all here, we ensure that the Base class knows about them
# when Alembic runs its auto-generation scan.

# Import the Base class that all models inherit from.
from .base_class import Base  # noqa: F401

# Import all of our model classes from their respective files.
from .models.announce_models import Announce  # noqa: F401
from .models.media_models import User, Device, Content, ContentView, Subscription  # noqa: F401
