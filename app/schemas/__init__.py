from app.schemas.course import CourseEnvelopeSchema, CourseListSchema, CourseOutSchema
from app.schemas.user import UserOutSchema

__all__ = [
    "CourseEnvelopeSchema",
    "CourseListSchema",
    "CourseOutSchema",
    "UserOutSchema",
]
