from .patient_service import PatientRepository, format_record_number
from .platform_service import detect_capabilities

__all__ = ["PatientRepository", "format_record_number", "detect_capabilities"]
