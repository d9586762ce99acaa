# webhook_listener/db.py
from __future__ import annotations
import os
from typing import Any, Optional
from sqlalchemy import BigInteger, JSON, String, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from .config import DEFAULT_DATABASE_URL
from .models import WebhookRecord

class Base(DeclarativeBase):
    pass

class WebhookRecordRow(Base):
    __tablename__ = "webhook_records"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    payload: Mapped[Any] = mapped_column(JSON(none_as_null=False), nullable=True)
    timestamp: Mapped[str] = mapped_column(String(32), nullable=False)
    received_at: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)

    def to_record(self) -> WebhookRecord:
        return WebhookRecord(
            id=self.id,
            payload=self.payload,
            timestamp=self.timestamp,
            received_at=self.received_at,
        )

def init_db(database_url: str | None):
    db_url = database_url or DEFAULT_DATABASE_URL
    if db_url.startswith("sqlite:///") and db_url != "sqlite:///:memory:":
        directory = os.path.dirname(db_url[len("sqlite:///"):])
        if directory:
            os.makedirs(directory, exist_ok=True)

    engine = create_engine(db_url, echo=False)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    return engine, SessionLocal

class SQLRecordStore:
    """Local development store backed by SQLAlchemy."""

    def __init__(self, database_url: str | None = None):
        self.engine, self.SessionLocal = init_db(database_url)

    def put(self, record: WebhookRecord) -> None:
        row = WebhookRecordRow(
            id=record.id,
            payload=record.payload,
            timestamp=record.timestamp,
            received_at=record.received_at,
        )
        with self.SessionLocal() as session:
            session.add(row)
            session.commit()

    def get(self, record_id: str) -> Optional[WebhookRecord]:
        with self.SessionLocal() as session:
            row = session.get(WebhookRecordRow, record_id)
            return row.to_record() if row is not None else None
