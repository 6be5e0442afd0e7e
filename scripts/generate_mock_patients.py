"""Seed the patient store with mock patients for performance testing.

Usage:
    python -m scripts.generate_mock_patients --count 5000
    PATIENTS_DB_PATH=/tmp/perf.db python -m scripts.generate_mock_patients
"""
import argparse
import logging
import random

from core.database import initialize
from core.logging_utils import configure_logging
from models.patient import Patient
from services.patient_service import PatientRepository

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    "John", "Jane", "Michael", "Sarah", "David", "Emily", "Robert", "Lisa", "James", "Mary",
    "William", "Jennifer", "Richard", "Linda", "Joseph", "Patricia", "Thomas", "Barbara",
]
LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Rodriguez",
    "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson", "Taylor", "Moore",
]
STREETS = ["Main St", "Oak Ave", "Elm St", "Pine Rd", "Maple Dr", "Cedar Ln", "Park Ave"]
CITIES = ["Springfield", "Riverside", "Franklin", "Georgetown", "Madison", "Salem", "Fairview"]
DIAGNOSES = [
    "Hypertension", "Type 2 Diabetes", "Asthma", "Arthritis", "Migraine", "Hypothyroidism",
    "Hyperlipidemia", "Chronic Pain", "Back Pain", "Chest Pain", "Shortness of Breath",
]


def mock_patient(rng: random.Random, record_number: str) -> Patient:
    diagnosis = None
    if rng.random() < 0.8:
        diagnosis = ", ".join(rng.sample(DIAGNOSES, rng.randint(1, 2)))
    return Patient(
        record_number=record_number,
        name=f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
        age=rng.randint(1, 95),
        address=f"{rng.randint(1, 9999)} {rng.choice(STREETS)}, {rng.choice(CITIES)}",
        phone_number=f"+1-555-{rng.randint(0, 9999):04d}",
        initial_diagnosis=diagnosis,
    )


def seed(repository: PatientRepository, count: int, seed_value: int | None = None) -> int:
    """Insert `count` mock patients; returns how many were added."""
    rng = random.Random(seed_value)
    added = 0
    for _ in range(count):
        record_number = repository.generate_record_number()
        repository.create(mock_patient(rng, record_number))
        added += 1
        if added % 500 == 0:
            logger.info("Inserted %d/%d patients", added, count)
    return added


def main():
    parser = argparse.ArgumentParser(description="Insert mock patients.")
    parser.add_argument("--count", type=int, default=5000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    configure_logging()
    repository = PatientRepository(initialize())
    added = seed(repository, args.count, args.seed)
    print(f"Added {added} patient(s); store now holds {repository.count()}.")


if __name__ == "__main__":
    main()
