"""Ownership check for update/delete of an owned record."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from app.core.errors import AccessDenied

if TYPE_CHECKING:
    from app.core.auth import Identity

logger = logging.getLogger(__name__)


class Owned(Protocol):
    @property
    def owner_id(self) -> int: ...


def authorize(identity: Identity, resource: Owned) -> None:
    """Raise AccessDenied unless `identity` owns `resource`.

    Call only after the resource has been found; a missing resource is a 404
    and never reaches this check.
    """
    if resource.owner_id != identity.id:
        logger.warning(
            "Access denied: user %s is not the owner of %s (owner %s)",
            identity.id, type(resource).__name__, resource.owner_id,
        )
        raise AccessDenied()
