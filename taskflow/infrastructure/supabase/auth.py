"""Identity provider client (Supabase GoTrue) over httpx.

Resolves a user's bearer token to an identity and deletes accounts through
the admin API. Token checks are a round trip per request; nothing is cached.
"""

from __future__ import annotations

import logging

import httpx

from taskflow.application.dtos.user import AuthenticatedUser
from taskflow.domain.exceptions import IdentityProviderException
from taskflow.infrastructure.supabase._rest_client import raise_for_upstream

logger = logging.getLogger(__name__)


class SupabaseAuthClient:
    """Token verification and admin user deletion against ``{url}/auth/v1``."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._auth_url = f"{base_url.rstrip('/')}/auth/v1"
        self._service_key = service_key
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _send(self, method: str, path: str, bearer: str) -> httpx.Response:
        headers = {"apikey": self._service_key, "Authorization": f"Bearer {bearer}"}
        try:
            return await self._http.request(method, f"{self._auth_url}/{path}", headers=headers)
        except httpx.HTTPError as e:
            logger.error("Identity provider request %s %s failed: %s", method, path, e)
            raise IdentityProviderException(f"Identity provider request failed: {e}") from e

    async def get_user(self, token: str) -> AuthenticatedUser | None:
        """Return the identity behind token, or None if the provider rejects it.

        Raises:
            IdentityProviderException: If the provider is unreachable or fails (5xx).
        """
        resp = await self._send("GET", "user", token)
        if resp.status_code in (400, 401, 403, 404, 422):
            return None
        raise_for_upstream(resp, IdentityProviderException)
        body = resp.json() or {}
        user_id = body.get("id")
        if not user_id:
            return None
        return AuthenticatedUser(id=user_id, email=body.get("email") or "")

    async def delete_user(self, user_id: str) -> None:
        """Delete the account. Owned rows are removed by the datastore's cascades.

        Raises:
            IdentityProviderException: If the provider refuses or fails.
        """
        resp = await self._send("DELETE", f"admin/users/{user_id}", self._service_key)
        raise_for_upstream(resp, IdentityProviderException)
        logger.info("Deleted identity account %s", user_id)
