"""Profile use cases: read, partial update, and account deletion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from taskflow.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from taskflow.application.interfaces.repositories import (
        IIdentityProvider,
        IProfileRepository,
    )

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class ProfileService:
    """The caller's own profile (profile id equals identity id)."""

    def __init__(self, profile_repo: IProfileRepository, identity: IIdentityProvider) -> None:
        self.profile_repo = profile_repo
        self.identity = identity

    async def get_profile(self, user_id: str) -> Row:
        profile = await self.profile_repo.get(user_id)
        if profile is None:
            logger.warning("No profile row for user %s", user_id)
            raise ResourceNotFoundException("profile", user_id)
        return profile

    async def update_profile(self, user_id: str, changes: Row) -> Row:
        await self.get_profile(user_id)
        profile = await self.profile_repo.update(user_id, changes)
        if profile is None:
            raise ResourceNotFoundException("profile", user_id)
        return profile

    async def delete_account(self, user_id: str) -> None:
        """Remove the identity; the datastore cascades the owner's rows."""
        await self.identity.delete_user(user_id)
        logger.info("Account %s deleted", user_id)
