from sqlalchemy import select
from sqlalchemy.orm import Session

from models.activity_log import ActivityLog

# Only the newest entries are kept
ACTIVITY_LOG_LIMIT = 500

PATIENT_CREATED = "created a new patient record"
PATIENT_UPDATED = "updated patient information"
PATIENT_DELETED = "deleted patient record"


# ------------------------------------------
# Add an entry inside the caller's transaction
# ------------------------------------------
def record_activity(
    db: Session,
    action: str,
    operator_name: str,
    target_id: int | None = None,
    target_name: str | None = None,
    target_type: str = "patient",
    keep: int = ACTIVITY_LOG_LIMIT,
) -> ActivityLog:
    entry = ActivityLog(
        action=action,
        operator_name=operator_name,
        target_type=target_type,
        target_id=target_id,
        target_name=target_name,
    )
    db.add(entry)
    db.flush()
    trim_activity(db, keep)
    return entry


def trim_activity(db: Session, keep: int = ACTIVITY_LOG_LIMIT) -> int:
    """Delete everything but the newest `keep` entries."""
    newest = select(ActivityLog.id).order_by(ActivityLog.id.desc()).limit(keep)
    return (
        db.query(ActivityLog)
        .filter(ActivityLog.id.not_in(newest))
        .delete(synchronize_session=False)
    )


# ------------------------------------------
# Newest first
# ------------------------------------------
def list_activity(db: Session, limit: int | None = None):
    q = db.query(ActivityLog).order_by(ActivityLog.id.desc())
    if limit is not None:
        q = q.limit(limit)
    return q.all()
