# models/activity_log.py

from sqlalchemy import Column, Integer, String, DateTime, func
from core.database import Base


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # e.g. "created a new patient record"
    action = Column(String, nullable=False)
    operator_name = Column(String, nullable=False)

    # What the action touched; only "patient" is written today
    target_type = Column(String, nullable=False, default="patient")
    target_id = Column(Integer, nullable=True)
    target_name = Column(String, nullable=True)

    created_at = Column(DateTime, server_default=func.current_timestamp())

    __table_args__ = {"sqlite_autoincrement": True}

    def to_dict(self):
        return {
            "id": self.id,
            "action": self.action,
            "operator_name": self.operator_name,
            "target_type": self.target_type,
            "target_id": self.target_id,
            "target_name": self.target_name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<ActivityLog {self.operator_name} {self.action} {self.target_name}>"
