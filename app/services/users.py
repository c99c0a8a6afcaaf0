"""User store: lookup by email or id, registration, deletion."""
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import EmailTaken
from app.core.security import hash_password
from app.models.course import Course
from app.models.user import User


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    email_norm = normalize_email(email)
    if not email_norm:
        return None
    result = await db.execute(select(User).where(User.email_address == email_norm))
    return result.scalar_one_or_none()


async def get_user(db: AsyncSession, user_id: int) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def create_user(
    db: AsyncSession,
    *,
    first_name: str,
    last_name: str,
    email_address: str,
    password: str,
) -> User:
    """Register a user; the password is hashed here and never stored as given.

    Raises EmailTaken when the address is already registered, including when a
    concurrent registration wins the race and the unique index rejects this one.
    """
    email_norm = normalize_email(email_address)
    if await get_user_by_email(db, email_norm) is not None:
        raise EmailTaken()

    user = User(
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        email_address=email_norm,
        hashed_password=hash_password(password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise EmailTaken()
    await db.refresh(user)
    return user


async def delete_user(db: AsyncSession, user_id: int) -> bool:
    """Delete a user and the courses they own. False if there was no such user."""
    await db.execute(delete(Course).where(Course.user_id == user_id))
    result = await db.execute(delete(User).where(User.id == user_id))
    await db.commit()
    return result.rowcount > 0
