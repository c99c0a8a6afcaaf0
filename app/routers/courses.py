"""Course routes. Reads are public; writes need an authenticated owner."""
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import Identity, require_identity
from app.core.config import get_settings
from app.core.errors import ResourceNotFound
from app.core.ownership import authorize
from app.core.validation import COURSE_RULES, as_object, ensure_valid, parse_record_id
from app.db.session import get_db
from app.models.course import Course
from app.schemas.course import CourseEnvelopeSchema, CourseListSchema, CourseOutSchema
from app.services.courses import (
    create_course,
    delete_course,
    get_course,
    list_courses,
    update_course,
)

router = APIRouter(tags=["courses"])
settings = get_settings()


async def get_course_or_404(db: AsyncSession, course_id: str, with_owner: bool = False) -> Course:
    pk = parse_record_id(course_id)
    course = None if pk is None else await get_course(db, pk, with_owner=with_owner)
    if course is None:
        raise ResourceNotFound("Course")
    return course


@router.get("/courses", response_model=CourseListSchema)
async def get_courses(
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """List all courses with their owner."""
    courses = await list_courses(db, with_owner=True)
    return CourseListSchema(courses=[CourseOutSchema.model_validate(c) for c in courses])


@router.get("/courses/{course_id}", response_model=CourseEnvelopeSchema)
async def get_course_by_id(
    course_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    course = await get_course_or_404(db, course_id, with_owner=True)
    return CourseEnvelopeSchema(course=CourseOutSchema.model_validate(course))


@router.post("/courses", status_code=status.HTTP_201_CREATED, response_class=Response)
async def post_course(
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[Identity, Depends(require_identity)],
    payload: Annotated[Any, Body()] = None,
):
    """Create a course owned by the caller; Location points at it."""
    data = as_object(payload)
    ensure_valid(data, COURSE_RULES)

    course = await create_course(db, owner_id=identity.id, fields=data)
    return Response(
        status_code=status.HTTP_201_CREATED,
        headers={"Location": f"{settings.api_prefix}/courses/{course.id}"},
    )


@router.put("/courses/{course_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def put_course(
    course_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[Identity, Depends(require_identity)],
    payload: Annotated[Any, Body()] = None,
):
    """Update a course. 404 if missing, 403 if not the owner, then 400 if invalid."""
    course = await get_course_or_404(db, course_id)
    authorize(identity, course)

    data = as_object(payload)
    ensure_valid(data, COURSE_RULES)

    if not await update_course(db, course.id, data):
        raise ResourceNotFound("Course")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/courses/{course_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def remove_course(
    course_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[Identity, Depends(require_identity)],
):
    course = await get_course_or_404(db, course_id)
    authorize(identity, course)

    if not await delete_course(db, course.id):
        raise ResourceNotFound("Course")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
