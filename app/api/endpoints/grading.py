from fastapi import APIRouter, Depends

from app.api.deps import get_grading_service
from app.schemas.chat import GradePaperRequest, GradePaperResponse
from app.services.grading.grading_service import GradingService

router = APIRouter()


@router.post("/paper", response_model=GradePaperResponse, summary="Grade a student's paper")
async def grade_paper(
    body: GradePaperRequest,
    service: GradingService = Depends(get_grading_service),
):
    """
    Grade the paper with the AI and store the extracted letter grade
    as the student's overall grade.
    """
    return await service.grade_paper(body.student_id, body.paper_text)
