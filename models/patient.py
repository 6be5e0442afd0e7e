# models/patient.py

from collections.abc import Mapping

from sqlalchemy import Column, Integer, String, DateTime, func
from core.database import Base
from core.errors import PayloadError

# Fields a frontend payload may carry; id and created_at belong to the store
PAYLOAD_FIELDS = (
    "record_number",
    "name",
    "age",
    "address",
    "phone_number",
    "initial_diagnosis",
)

# Fields an update is allowed to change
MUTABLE_FIELDS = ("name", "age", "address", "phone_number", "initial_diagnosis")


class Patient(Base):
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Human-facing identifier, e.g. PT002026000001
    record_number = Column(String, unique=True, nullable=False)

    # Intake details
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    address = Column(String, nullable=True)
    phone_number = Column(String, nullable=False)
    initial_diagnosis = Column(String, nullable=True)

    created_at = Column(DateTime, server_default=func.current_timestamp())

    __table_args__ = {"sqlite_autoincrement": True}

    @classmethod
    def from_dict(cls, data):
        """Build a transient Patient from a frontend payload.

        Unknown keys, `id` and `created_at` are ignored. Anything that is not
        a mapping, or a field of the wrong type, raises PayloadError.
        """
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise PayloadError(
                f"Invalid patient payload: expected an object, got {type(data).__name__}"
            )

        values = {key: data[key] for key in PAYLOAD_FIELDS if key in data}
        for key, value in values.items():
            if value is None:
                continue
            if key == "age":
                # bool is an int subclass; reject it like any other non-number
                if isinstance(value, bool) or not isinstance(value, int):
                    raise PayloadError("Invalid patient payload: age must be an integer")
            elif not isinstance(value, str):
                raise PayloadError(f"Invalid patient payload: {key} must be a string")
        return cls(**values)

    def to_dict(self):
        return {
            "id": self.id,
            "record_number": self.record_number,
            "name": self.name,
            "age": self.age,
            "address": self.address,
            "phone_number": self.phone_number,
            "initial_diagnosis": self.initial_diagnosis,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Patient {self.record_number} - {self.name}>"
