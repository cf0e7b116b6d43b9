"""Thin Supabase PostgREST client over httpx (no supabase-py).

Rows live under ``{url}/rest/v1/{table}``; filters are query parameters in
PostgREST syntax (``status=eq.completed``). Writes ask for the written rows
back with ``Prefer: return=representation``. Server-side functions are
called with ``POST {url}/rest/v1/rpc/{name}``.

All calls authenticate with the service key, so every query must carry its
own owner filter. All HTTP calls use httpx.AsyncClient so they do not block
the event loop.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx

from taskflow.domain.exceptions import StoreException, UpstreamException

logger = logging.getLogger(__name__)

Row = dict[str, Any]

# Characters PostgREST treats as syntax inside lists and logic trees.
_RESERVED = set(',.:()"\\ ')


def _render(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _quote(value: Any) -> str:
    """Render a value for a list or logic tree, double-quoting reserved characters."""
    text = _render(value)
    if any(ch in _RESERVED for ch in text):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


def condition(column: str, op: str, value: Any) -> str:
    """One clause of a logic tree, e.g. ``created_at.gte."2024-05-01T00:00:00+00:00"``."""
    return f"{column}.{op}.{_quote(value)}"


def all_of(*clauses: str) -> str:
    """Clauses joined with AND, for nesting inside ``TableQuery.or_``."""
    return f"and({','.join(clauses)})"


def _error_message(resp: httpx.Response) -> str:
    """Pull the human-readable message out of a PostgREST or GoTrue error body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(body, dict):
        for key in ("message", "msg", "error_description", "error"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {resp.status_code}"


def raise_for_upstream(
    resp: httpx.Response, exc_cls: type[UpstreamException] = StoreException
) -> None:
    """Raise exc_cls with the upstream message when the response is not 2xx."""
    if resp.is_success:
        return
    message = _error_message(resp)
    logger.warning(
        "Upstream %s %s failed: status=%s message=%s",
        resp.request.method,
        resp.request.url.path,
        resp.status_code,
        message,
    )
    raise exc_cls(message, status_code=resp.status_code)


class TableQuery:
    """Fluent PostgREST query over one table.

    Filters, ordering and paging accumulate on the instance; a terminal
    call (``execute``, ``maybe_single``, ``insert``, ``update``, ``delete``)
    sends the request. Get a fresh instance per query from
    ``SupabaseRESTClient.table``.
    """

    def __init__(self, client: SupabaseRESTClient, table: str) -> None:
        self._client = client
        self._table = table
        self._columns = "*"
        self._filters: list[tuple[str, str]] = []
        self._order: list[str] = []
        self._limit: int | None = None
        self._offset: int | None = None

    def select(self, columns: str = "*") -> TableQuery:
        """Columns to return, including embedded relations (``*, category:categories(*)``)."""
        self._columns = columns
        return self

    def _filter(self, column: str, op: str, value: Any) -> TableQuery:
        self._filters.append((column, f"{op}.{_render(value)}"))
        return self

    def eq(self, column: str, value: Any) -> TableQuery:
        return self._filter(column, "eq", value)

    def neq(self, column: str, value: Any) -> TableQuery:
        return self._filter(column, "neq", value)

    def gte(self, column: str, value: Any) -> TableQuery:
        return self._filter(column, "gte", value)

    def lt(self, column: str, value: Any) -> TableQuery:
        return self._filter(column, "lt", value)

    def not_null(self, column: str) -> TableQuery:
        self._filters.append((column, "not.is.null"))
        return self

    def contains(self, column: str, values: Iterable[Any]) -> TableQuery:
        """Array column contains every value (PostgREST ``cs``)."""
        rendered = ",".join(_quote(v) for v in values)
        self._filters.append((column, f"cs.{{{rendered}}}"))
        return self

    def or_(self, *clauses: str) -> TableQuery:
        """Match rows satisfying any clause (built with ``condition`` and ``all_of``)."""
        self._filters.append(("or", f"({','.join(clauses)})"))
        return self

    def ilike_any(self, columns: Iterable[str], term: str) -> TableQuery:
        """Case-insensitive substring match of term against any of columns."""
        return self.or_(*(condition(col, "ilike", f"*{term}*") for col in columns))

    def order(self, column: str, *, ascending: bool = True) -> TableQuery:
        self._order.append(f"{column}.{'asc' if ascending else 'desc'}")
        return self

    def limit(self, n: int) -> TableQuery:
        self._limit = n
        return self

    def range(self, start: int, end: int) -> TableQuery:
        """Inclusive row range, as in ``range(0, 49)`` for the first 50 rows."""
        self._offset = start
        self._limit = max(end - start + 1, 0)
        return self

    def build_params(self, *, include_select: bool = True) -> list[tuple[str, str]]:
        """Return the query string pairs this query sends."""
        params: list[tuple[str, str]] = []
        if include_select:
            params.append(("select", self._columns))
        params.extend(self._filters)
        if self._order:
            params.append(("order", ",".join(self._order)))
        if self._limit is not None:
            params.append(("limit", str(self._limit)))
        if self._offset:
            params.append(("offset", str(self._offset)))
        return params

    async def execute(self) -> list[Row]:
        """Run the query and return matching rows."""
        data = await self._client.request("GET", self._table, params=self.build_params())
        return data or []

    async def maybe_single(self) -> Row | None:
        """Return the first matching row, or None."""
        self._limit = 1
        rows = await self.execute()
        return rows[0] if rows else None

    async def insert(self, values: Row | list[Row]) -> list[Row]:
        """Insert one or more rows; returns the inserted rows with the selected columns."""
        data = await self._client.request(
            "POST",
            self._table,
            params=[("select", self._columns)],
            json=values,
            prefer="return=representation",
        )
        return data or []

    async def update(self, values: Row) -> list[Row]:
        """Update every row matching the filters; returns the updated rows."""
        if not self._filters:
            raise ValueError("update() without filters would touch every row")
        data = await self._client.request(
            "PATCH",
            self._table,
            params=self.build_params(),
            json=values,
            prefer="return=representation",
        )
        return data or []

    async def delete(self) -> list[Row]:
        """Delete every row matching the filters; returns the deleted rows."""
        if not self._filters:
            raise ValueError("delete() without filters would touch every row")
        data = await self._client.request(
            "DELETE",
            self._table,
            params=self.build_params(),
            prefer="return=representation",
        )
        return data or []


class SupabaseRESTClient:
    """Lightweight PostgREST client authenticated with the service key."""

    def __init__(
        self,
        base_url: str,
        service_key: str,
        *,
        schema: str = "public",
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._rest_url = f"{base_url.rstrip('/')}/rest/v1"
        self._service_key = service_key
        self._schema = schema
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    def _headers(self, prefer: str | None = None) -> dict[str, str]:
        headers = {
            "apikey": self._service_key,
            "Authorization": f"Bearer {self._service_key}",
            "Accept-Profile": self._schema,
            "Content-Profile": self._schema,
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
        prefer: str | None = None,
    ) -> Any:
        """Send one request to the REST endpoint and decode the JSON body.

        Raises:
            StoreException: On a non-2xx response or a transport failure.
        """
        url = f"{self._rest_url}/{path}"
        try:
            resp = await self._http.request(
                method, url, params=params, json=json, headers=self._headers(prefer)
            )
        except httpx.HTTPError as e:
            logger.error("Datastore request %s %s failed: %s", method, path, e)
            raise StoreException(f"Datastore request failed: {e}") from e
        raise_for_upstream(resp, StoreException)
        if not resp.content:
            return None
        return resp.json()

    def table(self, name: str) -> TableQuery:
        return TableQuery(self, name)

    async def rpc(self, function: str, params: dict[str, Any]) -> Any:
        """Call a server-side function and return its decoded result."""
        return await self.request("POST", f"rpc/{function}", json=params)
