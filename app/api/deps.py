from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.services.ai.gateway import AIGateway
from app.services.grading.grading_service import GradingService
from app.services.student.student import StudentStore


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency to get a database session from the application's Database.
    The session is closed automatically when the request finishes.
    """
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_student_store(db: Session = Depends(get_db)) -> StudentStore:
    return StudentStore(db)


def get_ai_gateway(request: Request) -> AIGateway:
    return request.app.state.ai_gateway


def get_grading_service(
    store: StudentStore = Depends(get_student_store),
    gateway: AIGateway = Depends(get_ai_gateway),
) -> GradingService:
    return GradingService(store, gateway)
