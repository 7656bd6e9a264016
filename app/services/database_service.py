# /app/services/database_service.py

import os
import logging

from app.db.database import SessionLocal, init_db

from .database_helpers.storage_repository import BaseStorageRepository, FileStorageRepository
from .database_helpers.storage_repository_sql import StorageRepositorySQL

logger = logging.getLogger(__name__)

DATA_DIR = os.getenv("HISTORY_DATA_DIR", "app/data")

# Determine which data source to use based on an environment variable
USE_POSTGRES = os.getenv("USE_POSTGRES", "false").lower() == "true"


def get_storage_backend() -> BaseStorageRepository:
    """
    Returns the durable key-value storage for this installation.
    If USE_POSTGRES is true, slots live in the SQL database at DATABASE_URL;
    otherwise they fall back to JSON files under DATA_DIR.
    """
    if USE_POSTGRES:
        init_db()
        logger.info("Using SQL storage backend.")
        return StorageRepositorySQL(SessionLocal)
    logger.info("Using file storage backend at '%s'.", DATA_DIR)
    return FileStorageRepository(DATA_DIR)
