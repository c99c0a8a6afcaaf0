"""Course store: list, lookup, create, update, delete."""
from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.course import Course

# Request field name -> column attribute. Only these can be set by an update.
UPDATABLE_FIELDS = {
    "title": "title",
    "description": "description",
    "estimatedTime": "estimated_time",
    "materialsNeeded": "materials_needed",
}


async def list_courses(db: AsyncSession, with_owner: bool = True) -> list[Course]:
    stmt = select(Course).order_by(Course.id.asc())
    if with_owner:
        stmt = stmt.options(selectinload(Course.owner))
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_course(db: AsyncSession, course_id: int, with_owner: bool = False) -> Course | None:
    stmt = select(Course).where(Course.id == course_id)
    if with_owner:
        stmt = stmt.options(selectinload(Course.owner))
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def create_course(db: AsyncSession, owner_id: int, fields: dict[str, Any]) -> Course:
    course = Course(
        user_id=owner_id,
        title=fields["title"],
        description=fields["description"],
        estimated_time=fields.get("estimatedTime"),
        materials_needed=fields.get("materialsNeeded"),
    )
    db.add(course)
    await db.commit()
    await db.refresh(course)
    return course


async def update_course(db: AsyncSession, course_id: int, fields: dict[str, Any]) -> bool:
    """Apply the updatable fields present in `fields`. The owner never changes."""
    values = {column: fields[key] for key, column in UPDATABLE_FIELDS.items() if key in fields}
    if not values:
        return await get_course(db, course_id) is not None
    result = await db.execute(
        update(Course).where(Course.id == course_id).values(**values)
    )
    await db.commit()
    return result.rowcount > 0


async def delete_course(db: AsyncSession, course_id: int) -> bool:
    result = await db.execute(delete(Course).where(Course.id == course_id))
    await db.commit()
    return result.rowcount > 0
