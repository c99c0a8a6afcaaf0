"""HTTP Basic authentication, re-run on every request.

Nothing is issued or remembered between requests: each request that needs an
identity sends `Authorization: Basic base64(email:password)` and the user is
looked up and the password verified again. The result is an immutable
`Identity` handed to the route handler as a parameter.

All failure kinds (no/malformed header, unknown email, wrong password) are
logged with their reason but answered with the same 401 body, so a client
cannot tell an unknown email from a wrong password.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import AuthFailure, NotAuthorized
from app.core.security import dummy_verify, parse_basic_credentials, verify_password
from app.db.session import get_db
from app.models.user import User
from app.services.users import get_user_by_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """The authenticated user for one request."""

    id: int
    first_name: str
    last_name: str
    email_address: str

    @classmethod
    def from_user(cls, user: User) -> Identity:
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email_address=user.email_address,
        )


async def authenticate(authorization: str | None, db: AsyncSession) -> Identity | AuthFailure:
    """Resolve the Authorization header to an Identity, or say why it can't be."""
    credentials = parse_basic_credentials(authorization)
    if credentials is None:
        return AuthFailure.NO_CREDENTIALS

    user = await get_user_by_email(db, credentials.username)
    if user is None:
        dummy_verify()
        return AuthFailure.UNKNOWN_USER

    if not verify_password(credentials.password, user.hashed_password):
        return AuthFailure.BAD_PASSWORD

    return Identity.from_user(user)


async def require_identity(
    db: Annotated[AsyncSession, Depends(get_db)],
    authorization: Annotated[str | None, Header()] = None,
) -> Identity:
    """Dependency for routes that need an authenticated user; 401 otherwise."""
    outcome = await authenticate(authorization, db)
    if isinstance(outcome, AuthFailure):
        logger.warning("Authentication failed: %s", outcome.value)
        raise NotAuthorized(outcome)

    logger.info(
        "Authentication successful for user %s (%s %s)",
        outcome.id, outcome.first_name, outcome.last_name,
    )
    return outcome
