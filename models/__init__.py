from .patient import Patient, PAYLOAD_FIELDS, MUTABLE_FIELDS
from .activity_log import ActivityLog

__all__ = ["Patient", "PAYLOAD_FIELDS", "MUTABLE_FIELDS", "ActivityLog"]
