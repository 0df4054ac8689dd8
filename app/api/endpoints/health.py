from fastapi import APIRouter

from app.schemas.chat import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    """
    Health check endpoint
    """
    return HealthResponse(status="ok", message="Server is running")
