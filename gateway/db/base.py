"""SQLAlchemy Declarative Base — shared base class for the external table models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all gateway ORM models."""
    pass
