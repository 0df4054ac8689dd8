from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(v):
    # HTML-style forms send "" for an untouched number input
    if isinstance(v, str) and not v.strip():
        return None
    return v


class StudentFields(BaseModel):
    """Writable fields; every one optional so presence is checked by the store."""
    name: Optional[str] = None
    age: Optional[int] = None
    class_: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("class", "class_"),
        serialization_alias="class",
    )
    overall_grade: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("overallGrade", "overall_grade"),
        serialization_alias="overallGrade",
    )

    @field_validator("age", mode="before")
    @classmethod
    def blank_age_is_missing(cls, v):
        return _blank_to_none(v)


class StudentCreate(StudentFields):
    pass


class StudentUpdate(StudentFields):
    pass


class Student(BaseModel):
    id: int
    name: str
    age: int
    class_: str = Field(
        validation_alias=AliasChoices("class_", "class"),
        serialization_alias="class",
    )
    overall_grade: str = Field(
        validation_alias=AliasChoices("overall_grade", "overallGrade"),
        serialization_alias="overallGrade",
    )
    created_at: datetime = Field(
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
