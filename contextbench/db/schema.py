"""Database schema for the context benchmark."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


class Account(Base):
    """Account created once per processed contact during a test run."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255))

    def __repr__(self):
        return f"Account(id={self.id!r}, name={self.name!r})"


class Contact(Base):
    """Contact seeded in bulk, optionally linked to one account."""

    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255))
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=True)

    account = relationship(Account)

    def __repr__(self):
        return f"Contact(id={self.id!r}, name={self.name!r}, account_id={self.account_id!r})"
