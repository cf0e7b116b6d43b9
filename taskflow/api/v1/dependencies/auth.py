"""Bearer-token auth dependency.

Every non-health route depends on get_current_user; a missing or rejected
token raises AuthenticationException (401) before any datastore call.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskflow.api.v1.dependencies.store import get_identity_provider
from taskflow.application.dtos.user import AuthenticatedUser
from taskflow.application.interfaces.repositories import IIdentityProvider
from taskflow.domain.exceptions import AuthenticationException
from taskflow.shared.context import set_current_user

logger = logging.getLogger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    identity: Annotated[IIdentityProvider, Depends(get_identity_provider)],
) -> AuthenticatedUser:
    """Resolve the bearer token to the caller; raise 401 if missing or invalid."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationException("Authentication token not provided")
    user = await identity.get_user(credentials.credentials)
    if user is None:
        logger.info("Rejected bearer token")
        raise AuthenticationException("Invalid or expired token")
    set_current_user(user.id, user.email)
    return user


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
