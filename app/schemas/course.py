"""Pydantic schemas for courses and their owner."""
from pydantic import BaseModel, Field

from app.schemas.user import UserOutSchema


class CourseOutSchema(BaseModel):
    id: int
    title: str
    description: str
    estimated_time: str | None = Field(default=None, serialization_alias="estimatedTime")
    materials_needed: str | None = Field(default=None, serialization_alias="materialsNeeded")
    user_id: int = Field(serialization_alias="userId")
    owner: UserOutSchema | None = None

    class Config:
        from_attributes = True


class CourseListSchema(BaseModel):
    courses: list[CourseOutSchema]


class CourseEnvelopeSchema(BaseModel):
    course: CourseOutSchema
