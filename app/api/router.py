from fastapi import APIRouter
from app.api.endpoints import chat
from app.api.endpoints import grading
from app.api.endpoints import health
from app.api.endpoints import students

api_router = APIRouter()

api_router.include_router(
    health.router,
    tags=["health"]
)

api_router.include_router(
    chat.router,
    prefix="/chat",
    tags=["chat"]
)

api_router.include_router(
    grading.router,
    prefix="/grade",
    tags=["grading"]
)

api_router.include_router(
    students.router,
    prefix="/students",
    tags=["students"]
)
