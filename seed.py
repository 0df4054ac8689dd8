import logging
from typing import Optional

from app.core.config import settings
from app.core.database import Database
from app.models.student import Student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_STUDENTS = [
    {"name": "Ada Lovelace", "age": 20, "class_": "CS101"},
    {"name": "Alan Turing", "age": 22, "class_": "CS101"},
    {"name": "Grace Hopper", "age": 21, "class_": "Math 201", "overall_grade": "A-"},
]


def seed_data(database: Optional[Database] = None) -> int:
    """
    Seed a few sample students into an empty roster.
    Returns the number of students inserted.
    """
    owns_database = database is None
    database = database or Database.from_settings(settings)
    database.create_tables()

    db = database.SessionLocal()
    try:
        # Check if data already exists to avoid duplication
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return 0

        logger.info("Seeding data...")
        db.add_all([Student(**data) for data in SAMPLE_STUDENTS])
        db.commit()

        logger.info(f"✅ Seeded {len(SAMPLE_STUDENTS)} students")
        return len(SAMPLE_STUDENTS)

    except Exception as e:
        logger.error(f"❌ Error seeding data: {e}")
        db.rollback() # Rollback if error occurs
        raise
    finally:
        db.close() # Always close the connection
        if owns_database:
            database.close()

if __name__ == "__main__":
    seed_data()
