from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# Request
class ChatRequest(BaseModel):
    message: Optional[str] = None


class GradePaperRequest(BaseModel):
    student_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("studentId", "student_id"),
    )
    paper_text: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("paperText", "paper_text"),
    )


# Response
class ChatResponse(BaseModel):
    response: str


class GradePaperResponse(BaseModel):
    response: str
    grade: str
    student_name: str = Field(alias="studentName")

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    status: str
    message: str
