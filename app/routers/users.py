"""User routes: current user, registration, account deletion."""
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import Identity, require_identity
from app.core.errors import ResourceNotFound
from app.core.ownership import authorize
from app.core.validation import USER_RULES, as_object, ensure_valid, parse_record_id
from app.db.session import get_db
from app.schemas.user import UserOutSchema
from app.services.users import create_user, delete_user, get_user

router = APIRouter(tags=["users"])


@router.get("/users", response_model=UserOutSchema)
async def get_current_user(
    identity: Annotated[Identity, Depends(require_identity)],
):
    """Return the authenticated user."""
    return UserOutSchema.model_validate(identity)


@router.post("/users", status_code=status.HTTP_201_CREATED, response_class=Response)
async def register_user(
    db: Annotated[AsyncSession, Depends(get_db)],
    payload: Annotated[Any, Body()] = None,
):
    """Create a user. 201 with no body; 400 on invalid fields or a taken email."""
    data = as_object(payload)
    ensure_valid(data, USER_RULES)

    await create_user(
        db,
        first_name=data["firstName"],
        last_name=data["lastName"],
        email_address=data["emailAddress"],
        password=data["password"],
    )
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": "/"})


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def remove_user(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    identity: Annotated[Identity, Depends(require_identity)],
):
    """Delete the caller's own account along with their courses."""
    pk = parse_record_id(user_id)
    user = None if pk is None else await get_user(db, pk)
    if user is None:
        raise ResourceNotFound("User")
    authorize(identity, user)

    if not await delete_user(db, user.id):
        raise ResourceNotFound("User")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
