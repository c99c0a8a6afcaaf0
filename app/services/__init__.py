from app.services.courses import (
    create_course,
    delete_course,
    get_course,
    list_courses,
    update_course,
)
from app.services.users import create_user, delete_user, get_user, get_user_by_email

__all__ = [
    "create_course",
    "delete_course",
    "get_course",
    "list_courses",
    "update_course",
    "create_user",
    "delete_user",
    "get_user",
    "get_user_by_email",
]
