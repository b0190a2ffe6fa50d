"""
HTTP client for the LawDesk API, used by every console view.

GET results are kept in a ``QueryCache`` keyed by query identity (path plus
sorted params) for the lifetime of the browser session, so panels that ask
for the same data share one fetch. Mutations drop the cached queries of the
collection they touched, plus the dashboard aggregates.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Optional, Tuple

import requests

logger = logging.getLogger("console")

QueryKey = Tuple[str, Tuple[Tuple[str, str], ...]]


class ApiError(Exception):
    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class UnauthorizedError(ApiError):
    """Session missing or expired."""


class ApiUnavailableError(ApiError):
    """API unreachable or answered 5xx."""


# ----------------------------------------------------------
# query cache
# ----------------------------------------------------------
class QueryCache:
    def __init__(self) -> None:
        self._store: Dict[QueryKey, Any] = {}

    @staticmethod
    def key(path: str, params: Optional[dict] = None) -> QueryKey:
        items = sorted((k, str(v)) for k, v in (params or {}).items() if v is not None)
        return path, tuple(items)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: QueryKey) -> Any:
        return self._store[key]

    def set(self, key: QueryKey, value: Any) -> None:
        self._store[key] = value

    def invalidate(self, prefix: str) -> int:
        stale = [k for k in self._store if k[0].startswith(prefix)]
        for k in stale:
            del self._store[k]
        return len(stale)

    def clear(self) -> None:
        self._store.clear()


def collection_root(path: str) -> str:
    """'/api/contracts/abc' -> '/api/contracts'"""
    return "/".join(path.split("/")[:3])


# ----------------------------------------------------------
# client
# ----------------------------------------------------------
class ApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
        cache: Optional[QueryCache] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.cache = cache or QueryCache()

    def _request(self, method: str, path: str, params: Optional[dict] = None, json: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, params=params, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("API unreachable: %s %s (%s)", method, path, e)
            raise ApiUnavailableError(0, str(e)) from e

        if resp.status_code == 401:
            raise UnauthorizedError(401, "Unauthorized")
        if resp.status_code >= 500:
            logger.warning("API error: %s %s -> %s", method, path, resp.status_code)
            raise ApiUnavailableError(resp.status_code, resp.text)
        if resp.status_code >= 400:
            raise ApiError(resp.status_code, _detail(resp))

        if not resp.content:
            return None
        return resp.json()

    # --- reads ---
    def query(self, path: str, params: Optional[dict] = None) -> Any:
        key = self.cache.key(path, params)
        if key in self.cache:
            return self.cache.get(key)

        clean = {k: v for k, v in (params or {}).items() if v is not None}
        data = self._request("GET", path, params=clean or None)
        self.cache.set(key, data)
        return data

    # --- writes ---
    def mutate(self, method: str, path: str, json: Any = None) -> Any:
        data = self._request(method, path, json=json)
        self.cache.invalidate(collection_root(path))
        self.cache.invalidate("/api/dashboard")
        return data

    def create(self, path: str, payload: dict) -> Any:
        return self.mutate("POST", path, payload)

    def update(self, path: str, payload: dict) -> Any:
        return self.mutate("PATCH", path, payload)

    def delete(self, path: str) -> Any:
        return self.mutate("DELETE", path)

    # --- auth ---
    def login(self, email: str, password: str) -> dict:
        user = self._request("POST", "/api/login", json={"email": email, "password": password})
        self.cache.clear()
        return user

    def logout(self) -> None:
        try:
            self._request("POST", "/api/logout")
        finally:
            self.session.cookies.clear()
            self.cache.clear()

    def current_user(self) -> Optional[dict]:
        try:
            return self._request("GET", "/api/auth/user")
        except UnauthorizedError:
            return None


def _detail(resp) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    detail = body.get("detail", body) if isinstance(body, dict) else body
    if isinstance(detail, list):
        # pydantic validation errors
        return "; ".join(str(d.get("msg", d)) for d in detail)
    return str(detail)
