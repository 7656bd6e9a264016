# /app/db/models/storage_models.py

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from ..base_class import Base


class StorageEntry(Base):
    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True, index=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
