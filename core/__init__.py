from .database import Base, initialize, open_in_memory, create_schema
from .errors import ErrorKind, RepositoryError, classify_db_error
from .time_utils import now_utc, current_year

__all__ = [
    "Base",
    "initialize",
    "open_in_memory",
    "create_schema",
    "ErrorKind",
    "RepositoryError",
    "classify_db_error",
    "now_utc",
    "current_year",
]
