import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from app.core.exceptions import BadRequestException
from app.core.prompt.prompts import build_grading_prompt
from app.schemas.chat import GradePaperResponse
from app.services.ai.gateway import AIGateway
from app.services.grading.grade_parser import extract_grade
from app.services.student.student import StudentStore

logger = logging.getLogger(__name__)


class GradingService:
    def __init__(self, store: StudentStore, gateway: AIGateway):
        self.store = store
        self.gateway = gateway

    async def grade_paper(self, student_id: Optional[int], paper_text: Optional[str]) -> GradePaperResponse:
        """
        Main Logic: Validate -> Load student -> Ask AI -> Extract grade -> Save grade.

        The grade is written only after the AI call succeeded, so a failed
        call leaves the student untouched.
        """
        if not student_id or not paper_text:
            raise BadRequestException("Student ID and paper text are required")

        # Store calls are blocking; keep them off the event loop
        student = await run_in_threadpool(self.store.get, student_id)

        response = await self.gateway.ask("grading", build_grading_prompt(paper_text))
        grade = extract_grade(response)

        await run_in_threadpool(self.store.set_grade, student_id, grade)
        logger.info(f"Graded paper for student {student_id} ({student.name}): {grade}")

        return GradePaperResponse(
            response=response,
            grade=grade,
            studentName=student.name,
        )
