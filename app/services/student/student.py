import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestException, NotFoundException
from app.models.student import DEFAULT_GRADE, Student
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)

STUDENT_NOT_FOUND = "Student not found"


class StudentStore:
    """
    CRUD over the students table.

    Each method runs and commits a single statement against the session
    it was built with.
    """

    def __init__(self, db: Session):
        self.db = db

    def _find(self, student_id: int) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def list(self) -> List[Student]:
        """All students, ordered by name"""
        return self.db.query(Student).order_by(Student.name).all()

    def get(self, student_id: int) -> Student:
        student = self._find(student_id)
        if student is None:
            raise NotFoundException(STUDENT_NOT_FOUND)
        return student

    def create(self, student: StudentCreate) -> Student:
        if not student.name or not student.age or not student.class_:
            raise BadRequestException("Name, age, and class are required")

        db_student = Student(
            name=student.name,
            age=student.age,
            class_=student.class_,
            overall_grade=student.overall_grade or DEFAULT_GRADE,
        )
        self.db.add(db_student)
        self.db.commit()
        self.db.refresh(db_student)
        logger.info(f"Created student {db_student.id} ({db_student.name})")
        return db_student

    def update(self, student_id: int, student: StudentUpdate) -> Student:
        """
        Partial update. A field that is omitted or falsy keeps its current
        value, so `age=0` or `overallGrade=""` are ignored.
        """
        db_student = self.get(student_id)
        db_student.name = student.name or db_student.name
        db_student.age = student.age or db_student.age
        db_student.class_ = student.class_ or db_student.class_
        db_student.overall_grade = student.overall_grade or db_student.overall_grade
        self.db.commit()
        self.db.refresh(db_student)
        logger.info(f"Updated student {student_id}")
        return db_student

    def set_grade(self, student_id: int, grade: str) -> None:
        """Overwrite overallGrade only; used as the grading side effect."""
        updated = (
            self.db.query(Student)
            .filter(Student.id == student_id)
            .update({Student.overall_grade: grade}, synchronize_session=False)
        )
        self.db.commit()
        if updated == 0:
            raise NotFoundException(STUDENT_NOT_FOUND)

    def delete(self, student_id: int) -> None:
        deleted = (
            self.db.query(Student)
            .filter(Student.id == student_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if deleted == 0:
            raise NotFoundException(STUDENT_NOT_FOUND)
        logger.info(f"Deleted student {student_id}")
