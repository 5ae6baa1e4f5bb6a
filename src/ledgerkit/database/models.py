"""SQLAlchemy models for the ledgerkit database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Boolean,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Chart-of-accounts model."""

    __tablename__ = "chart_of_accounts"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    nature = Column(String, nullable=False)
    statement_role = Column(String, default="none", nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    journal_entries = relationship("JournalEntry", back_populates="account")


class JournalEntry(Base):
    """Journal entry (ledger line) model.

    Amounts are stored as integer minor units; the sign lives in entry_type.
    """

    __tablename__ = "journal_entries"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("chart_of_accounts.id"), nullable=False)
    transaction_id = Column(String, nullable=True)
    entry_type = Column(String, nullable=False)
    amount = Column(Integer, nullable=False)
    entry_date = Column(Date, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index("ix_journal_entries_entry_date", "entry_date"),
        Index("ix_journal_entries_transaction_id", "transaction_id"),
    )

    # Relationships
    account = relationship("Account", back_populates="journal_entries")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
