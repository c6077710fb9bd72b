"""
Pydantic schemas for student records.

Student records have an open schema: whatever fields the client sends
are stored verbatim.  ``name`` is the documented convention, so it
appears in the generated OpenAPI document, but it is not declared as a
model field and therefore never required, coerced or filled in with a
default.
"""

from pydantic import BaseModel, ConfigDict

_NAME_PROPERTY = {"name": {"type": "string", "description": "Student name"}}


class StudentCreate(BaseModel):
    """Schema for creating a new student record."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "properties": _NAME_PROPERTY,
            "required": ["name"],
            "examples": [{"name": "Alice"}],
        },
    )


class StudentUpdate(BaseModel):
    """Schema for updating a student record.

    Only the fields provided are changed; everything else is kept.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"properties": _NAME_PROPERTY, "examples": [{"name": "Alicia"}]},
    )


class StudentRead(BaseModel):
    """Schema for reading a student record."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"examples": [{"id": 1, "name": "Alice"}]},
    )

    id: int
