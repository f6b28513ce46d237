"""Database layer."""

from gtd.db.engine import Database
from gtd.db.models import Base, TaskRecord

__all__ = [
    # Engine
    "Database",
    # Models
    "Base",
    "TaskRecord",
]
