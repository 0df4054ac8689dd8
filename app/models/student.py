from sqlalchemy import Column, DateTime, Integer, String, func
from app.core.database import Base

DEFAULT_GRADE = "N/A"


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    # "class" and the camelCase names are the column names clients see
    class_ = Column("class", String, nullable=False)
    overall_grade = Column("overallGrade", String, nullable=False, default=DEFAULT_GRADE, server_default=DEFAULT_GRADE)
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.current_timestamp())

    def __repr__(self):
        return f"<Student id={self.id} name={self.name!r} class={self.class_!r} grade={self.overall_grade}>"
