from fastapi import APIRouter, Depends, status
from typing import List
from app.api.deps import get_student_store
from app.services.student.student import StudentStore
from app.schemas.student import MessageResponse, Student, StudentCreate, StudentUpdate

router = APIRouter()


@router.get("", response_model=List[Student])
def get_students(store: StudentStore = Depends(get_student_store)):
    """
    List the whole roster, ordered by name
    """
    return store.list()


@router.get("/{student_id}", response_model=Student)
def get_student(
    student_id: int,
    store: StudentStore = Depends(get_student_store)
):
    """
    Get one student by ID
    """
    return store.get(student_id)


@router.post("", response_model=Student, status_code=status.HTTP_201_CREATED)
def create_student(
    student: StudentCreate,
    store: StudentStore = Depends(get_student_store)
):
    """
    Create a new student

    Required:
    - **name**: Student name
    - **age**: Age
    - **class**: Course / section label

    Optional:
    - **overallGrade**: defaults to `N/A`
    """
    return store.create(student)


@router.put("/{student_id}", response_model=Student)
def update_student(
    student_id: int,
    student: StudentUpdate,
    store: StudentStore = Depends(get_student_store)
):
    """
    Update a student. Omitted or empty fields keep their current value.
    """
    return store.update(student_id, student)


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(
    student_id: int,
    store: StudentStore = Depends(get_student_store)
):
    """
    Delete a student
    """
    store.delete(student_id)
    return MessageResponse(message="Student deleted successfully")
