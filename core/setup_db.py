# core/setup_db.py

from core.database import initialize
from core.logging_utils import configure_logging


def main():
    configure_logging()

    print("Creating database tables...")
    engine = initialize()
    print(f"Database ready: {engine.url}")


if __name__ == "__main__":
    main()
