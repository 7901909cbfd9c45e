from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint, func
from manasooth.database import Base

class StorageEntry(Base):
    __tablename__ = "storage_entries"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(String(64), nullable=False, index=True)
    key = Column(String(100), nullable=False)
    value = Column(Text, nullable=False)  # raw JSON text, never parsed at this layer
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint("client_id", "key", name="uq_client_key"),
    )
