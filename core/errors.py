from enum import Enum

from sqlalchemy.exc import IntegrityError, SQLAlchemyError


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    CONSTRAINT_VIOLATION = "constraint_violation"
    IO_FAILURE = "io_failure"
    UNSUPPORTED = "unsupported"


class RepositoryError(Exception):
    """Failure raised by the repository and platform layers.

    `kind` is meant for code, the message for people. The command layer
    only ever shows the message.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self):
        return f"<RepositoryError {self.kind.value}: {self.message}>"


class PayloadError(ValueError):
    """A command argument that does not have the expected shape."""


def classify_db_error(exc: SQLAlchemyError) -> RepositoryError:
    """Map a SQLAlchemy exception onto a RepositoryError."""
    # DBAPI errors wrap the sqlite3 exception; its text is the useful part
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)

    if isinstance(exc, IntegrityError):
        return RepositoryError(ErrorKind.CONSTRAINT_VIOLATION, message)
    return RepositoryError(ErrorKind.IO_FAILURE, message)
