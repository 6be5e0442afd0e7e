import logging
import threading
from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from core.config import get_settings
from core.errors import ErrorKind, RepositoryError, classify_db_error
from core.time_utils import now_utc, current_year
from models.patient import Patient, MUTABLE_FIELDS
from services import activity_service

logger = logging.getLogger(__name__)

RECORD_PREFIX = "PT"

ADDED_MESSAGE = "Patient added successfully"
UPDATED_MESSAGE = "Patient updated successfully"
DELETED_MESSAGE = "Patient deleted successfully"


def format_record_number(year: int, sequence: int) -> str:
    """PT + year padded to 6 digits + sequence padded to 6 digits.

    The year keeps its 6-digit padding (PT002026...), existing record
    numbers rely on the fixed total length.
    """
    return f"{RECORD_PREFIX}{year:06d}{sequence:06d}"


class PatientRepository:
    """Patient CRUD over one shared SQLite connection.

    Every operation holds the repository lock for the length of its
    transaction, so reads and writes are all serialized. Create, update and
    delete write their activity-log entry in the same transaction.
    """

    def __init__(self, engine: Engine, clock=now_utc, operator_name: str | None = None):
        self.engine = engine
        self.clock = clock
        self.operator_name = operator_name or get_settings().operator_name
        self._lock = threading.Lock()
        self._session_factory = sessionmaker(
            bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    @contextmanager
    def _session(self):
        with self._lock:
            db: Session = self._session_factory()
            try:
                yield db
            except SQLAlchemyError as exc:
                db.rollback()
                raise classify_db_error(exc) from exc
            finally:
                db.close()

    # ------------------------------------------
    # Fetch ALL patients, newest first
    # ------------------------------------------
    def list(self) -> list[Patient]:
        with self._session() as db:
            return db.query(Patient).order_by(Patient.id.desc()).all()

    # ------------------------------------------
    # Fetch a single patient by id
    # ------------------------------------------
    def get(self, patient_id: int) -> Patient:
        with self._session() as db:
            patient = db.query(Patient).filter(Patient.id == patient_id).first()
        if patient is None:
            raise RepositoryError(ErrorKind.NOT_FOUND, f"Patient {patient_id} not found")
        return patient

    # ------------------------------------------
    # Create a new patient (id and created_at come from the store)
    # ------------------------------------------
    def create(self, patient: Patient) -> str:
        row = Patient(
            record_number=patient.record_number,
            name=patient.name,
            age=patient.age,
            address=patient.address,
            phone_number=patient.phone_number,
            initial_diagnosis=patient.initial_diagnosis,
        )
        with self._session() as db:
            db.add(row)
            db.flush()
            activity_service.record_activity(
                db, activity_service.PATIENT_CREATED, self.operator_name, row.id, row.name
            )
            db.commit()
        logger.info("Added patient %s", row.record_number)
        return ADDED_MESSAGE

    # ------------------------------------------
    # Update mutable fields; no match is not an error
    # ------------------------------------------
    def update(self, patient_id: int, patient: Patient) -> str:
        values = {field: getattr(patient, field) for field in MUTABLE_FIELDS}
        with self._session() as db:
            matched = (
                db.query(Patient)
                .filter(Patient.id == patient_id)
                .update(values, synchronize_session=False)
            )
            if matched:
                activity_service.record_activity(
                    db, activity_service.PATIENT_UPDATED, self.operator_name, patient_id, patient.name
                )
            db.commit()
        logger.debug("Update of patient %s matched %d row(s)", patient_id, matched)
        return UPDATED_MESSAGE

    # ------------------------------------------
    # Hard delete; no match is not an error
    # ------------------------------------------
    def delete(self, patient_id: int) -> str:
        with self._session() as db:
            name = db.query(Patient.name).filter(Patient.id == patient_id).scalar()
            matched = (
                db.query(Patient)
                .filter(Patient.id == patient_id)
                .delete(synchronize_session=False)
            )
            if matched:
                activity_service.record_activity(
                    db, activity_service.PATIENT_DELETED, self.operator_name, patient_id, name
                )
            db.commit()
        logger.debug("Delete of patient %s matched %d row(s)", patient_id, matched)
        return DELETED_MESSAGE

    # ------------------------------------------
    # Next record number (advisory, nothing is reserved)
    # ------------------------------------------
    def generate_record_number(self) -> str:
        with self._session() as db:
            count = db.query(Patient).count()
        return format_record_number(current_year(self.clock), count + 1)

    def count(self) -> int:
        with self._session() as db:
            return db.query(Patient).count()

    # ------------------------------------------
    # Activity log, newest first
    # ------------------------------------------
    def list_activity(self, limit: int | None = None):
        with self._session() as db:
            return activity_service.list_activity(db, limit)
