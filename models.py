from sqlalchemy import Column, Integer, String, Text, DateTime, TypeDecorator, func
from sqlalchemy.orm import declarative_base
import json

Base = declarative_base()

class JSONType(TypeDecorator):
    """JSON stored as text so it works the same on SQLite and Postgres."""
    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return json.dumps(value, ensure_ascii=False)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return json.loads(value)


class HistoryEntry(Base):
    """One row per user: the whole analysis history list under a user-scoped key."""
    __tablename__ = "analysis_history"
    storage_key = Column(String, primary_key=True)  # analysisHistory_<email>
    records = Column(JSONType, nullable=False, default=list)
    version = Column(Integer, nullable=False, default=0)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
