"""
Student endpoints.

These routes provide CRUD operations over the in‑memory student store.
Records are addressed by their integer ``id``; the path segment is
taken as text and matched loosely (``/students/01`` finds record 1).
Unknown ids produce a plain‑text ``404 Not Found`` for reads and
updates, while deleting an unknown id still answers ``204``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status

from student_records_api.app.core.dependencies import get_student_service
from student_records_api.app.schemas.student import StudentCreate, StudentRead, StudentUpdate
from student_records_api.app.services.student_service import StudentService

router = APIRouter()

_NOT_FOUND = {
    status.HTTP_404_NOT_FOUND: {
        "description": "Student not found",
        "content": {"text/plain": {"example": "Not Found"}},
    }
}


@router.get(
    "",
    response_model=List[StudentRead],
    summary="Get the complete list of student records",
    response_description="A list of students",
)
async def list_students(
    service: StudentService = Depends(get_student_service),
) -> List[Dict[str, Any]]:
    return service.list_students()


@router.post(
    "",
    response_model=StudentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new student to the system",
    response_description="Student created successfully",
)
async def create_student(
    payload: Optional[StudentCreate] = None,
    service: StudentService = Depends(get_student_service),
) -> Dict[str, Any]:
    """Create a student record from the request body.

    Every field of the body is stored as sent; the record receives the
    next free ``id``.  A request without a body creates a record that
    holds only its ``id``.
    """
    return service.create_student(payload.model_dump() if payload is not None else {})


@router.get(
    "/{student_id}",
    response_model=StudentRead,
    summary="Fetch details of a specific student by ID",
    response_description="Student found",
    responses=_NOT_FOUND,
)
async def get_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> Dict[str, Any]:
    return service.get_student(student_id)


@router.put(
    "/{student_id}",
    response_model=StudentRead,
    summary="Modify the name of an existing student by ID",
    response_description="Student updated successfully",
    responses=_NOT_FOUND,
)
async def update_student(
    student_id: str,
    payload: Optional[StudentUpdate] = None,
    service: StudentService = Depends(get_student_service),
) -> Dict[str, Any]:
    """Merge the request body into an existing student record."""
    changes = payload.model_dump() if payload is not None else {}
    return service.update_student(student_id, changes)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a student record from the system by ID",
    response_description="Student deleted successfully",
)
async def delete_student(
    student_id: str,
    service: StudentService = Depends(get_student_service),
) -> None:
    """Delete a student record.

    Answers ``204`` whether or not the record existed.
    """
    service.delete_student(student_id)
