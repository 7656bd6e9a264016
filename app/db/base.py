# /app/db/base.py

# Central registry for the SQLAlchemy models. Importing them here ensures the
# Base metadata knows every table before `create_all` runs.

from .base_class import Base

from .models.storage_models import StorageEntry
