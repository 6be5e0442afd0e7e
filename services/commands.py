"""
Frontend command surface

Each command is a plain function; `invoke()` dispatches by name and wraps
the outcome as {"ok": value} or {"error": message}. Errors are classified
internally (RepositoryError.kind) and only flattened to text here.
"""

import inspect
import logging
import threading

from core.database import initialize
from core.errors import PayloadError, RepositoryError
from models.patient import Patient
from services.patient_service import PatientRepository
from services.platform_service import PlatformCapabilities, detect_capabilities

logger = logging.getLogger(__name__)

_state_lock = threading.Lock()
_repository: PatientRepository | None = None
_capabilities: PlatformCapabilities | None = None


def get_capabilities() -> PlatformCapabilities:
    global _capabilities
    with _state_lock:
        if _capabilities is None:
            _capabilities = detect_capabilities()
        return _capabilities


def set_capabilities(capabilities: PlatformCapabilities | None):
    global _capabilities
    with _state_lock:
        _capabilities = capabilities


def get_repository() -> PatientRepository:
    """Return the process-wide repository, opening the store on first use."""
    global _repository
    capabilities = get_capabilities()
    with _state_lock:
        if _repository is None:
            _repository = PatientRepository(initialize(capabilities=capabilities))
        return _repository


def set_repository(repository: PatientRepository | None):
    global _repository
    with _state_lock:
        _repository = repository


# -----------------------------
# Commands
# -----------------------------
def _patient_id(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadError(f"Invalid patient id: {value!r}")
    return value


def get_patients():
    return [p.to_dict() for p in get_repository().list()]


def get_patient(id: int):
    return get_repository().get(_patient_id(id)).to_dict()


def add_patient(patient):
    return get_repository().create(Patient.from_dict(patient))


def update_patient(id: int, patient):
    return get_repository().update(_patient_id(id), Patient.from_dict(patient))


def delete_patient(id: int):
    return get_repository().delete(_patient_id(id))


def generate_record_number():
    return get_repository().generate_record_number()


def get_activity_logs(limit: int | None = None):
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 0):
        raise PayloadError(f"Invalid limit: {limit!r}")
    return [entry.to_dict() for entry in get_repository().list_activity(limit)]


def print_invoice(text: str, job_name: str | None = None):
    if not isinstance(text, str) or not (job_name is None or isinstance(job_name, str)):
        raise PayloadError("Invalid print request: text and job_name must be strings")
    return get_capabilities().print_invoice(text, job_name)


COMMANDS = {
    "get_patients": get_patients,
    "get_patient": get_patient,
    "add_patient": add_patient,
    "update_patient": update_patient,
    "delete_patient": delete_patient,
    "generate_record_number": generate_record_number,
    "get_activity_logs": get_activity_logs,
    "print_invoice": print_invoice,
}


def invoke(name: str, **kwargs) -> dict:
    """Run a command by name. Never raises for command failures."""
    handler = COMMANDS.get(name)
    if handler is None:
        return {"error": f"Unknown command: {name}"}

    try:
        inspect.signature(handler).bind(**kwargs)
    except TypeError as exc:
        return {"error": f"Invalid arguments for {name}: {exc}"}

    try:
        return {"ok": handler(**kwargs)}
    except PayloadError as exc:
        logger.warning("Command %s rejected its arguments: %s", name, exc)
        return {"error": str(exc)}
    except RepositoryError as exc:
        logger.warning("Command %s failed (%s): %s", name, exc.kind.value, exc.message)
        return {"error": exc.message}
