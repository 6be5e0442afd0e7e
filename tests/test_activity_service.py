import pytest

from core.errors import RepositoryError
from services import activity_service
from services.patient_service import PatientRepository


def test_create_update_delete_are_logged_newest_first(repository, make_patient):
    repository.create(make_patient(name="Ada"))
    [patient] = repository.list()
    repository.update(patient.id, make_patient(name="Ada King"))
    repository.delete(patient.id)

    entries = repository.list_activity()
    assert [e.action for e in entries] == [
        activity_service.PATIENT_DELETED,
        activity_service.PATIENT_UPDATED,
        activity_service.PATIENT_CREATED,
    ]
    assert [e.target_name for e in entries] == ["Ada King", "Ada King", "Ada"]
    assert entries[0].created_at is not None


def test_no_op_update_and_delete_are_not_logged(repository, make_patient):
    repository.create(make_patient())
    repository.update(404, make_patient(name="Nobody"))
    repository.delete(404)

    assert [e.action for e in repository.list_activity()] == [activity_service.PATIENT_CREATED]


def test_failed_create_leaves_no_entry(repository, make_patient):
    repository.create(make_patient())
    with pytest.raises(RepositoryError):
        repository.create(make_patient(name="Duplicate"))

    assert len(repository.list_activity()) == 1


def test_operator_defaults_to_settings(engine, make_patient, monkeypatch):
    monkeypatch.setenv("PATIENTS_OPERATOR", "Dr. Lee")
    PatientRepository(engine).create(make_patient())

    monkeypatch.delenv("PATIENTS_OPERATOR")
    PatientRepository(engine).create(make_patient(record_number="PT002026000002"))

    assert [e.operator_name for e in PatientRepository(engine).list_activity()] == ["Admin", "Dr. Lee"]


def test_log_is_capped_to_newest_entries(engine):
    from sqlalchemy.orm import Session

    with Session(engine) as db:
        for n in range(8):
            activity_service.record_activity(db, f"action {n}", "Admin", n, keep=5)
        db.commit()

        entries = activity_service.list_activity(db)
        assert [e.action for e in entries] == [f"action {n}" for n in range(7, 2, -1)]
        assert [e.action for e in activity_service.list_activity(db, limit=2)] == ["action 7", "action 6"]