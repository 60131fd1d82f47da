import json
from urllib.parse import quote

from httpx import AsyncClient

from furballs.stores.base import RemoteService, StoreRequestError, with_httpx

_FORBIDDEN_KEY_CHARS = set(".#$[]/")

Record = dict[str, ...]


def _segment(value: str) -> str:
    if not value or _FORBIDDEN_KEY_CHARS.intersection(value):
        raise ValueError(f"Invalid database key: {value!r}")
    return quote(value, safe="")


def node_path(*segments: str) -> str:
    return "/".join(_segment(segment) for segment in segments)


class FirebaseDatabase(RemoteService):
    """Firebase Realtime Database accessed through its REST interface.

    Every method performs exactly one request. Failures are raised as
    StoreRequestError and are never retried here.
    """

    def __init__(self, database_url: str, auth_token: str | None = None, timeout: float = 10) -> None:
        super().__init__(database_url, timeout)
        self._auth_token = auth_token

    def _params(self, **params: str) -> dict[str, str]:
        if self._auth_token:
            params["auth"] = self._auth_token
        return params

    @with_httpx
    async def write(self, client: AsyncClient, path: str, record: Record) -> None:
        resp = await client.put(f"/{path}.json", json=record, params=self._params())
        self.check_response(resp, f"Database write to {path!r}")

    @with_httpx
    async def push(self, client: AsyncClient, collection: str, record: Record) -> str:
        resp = await client.post(f"/{collection}.json", json=record, params=self._params())
        self.check_response(resp, f"Database push to {collection!r}")

        key = resp.json().get("name")
        if not key:
            raise StoreRequestError(f"Database push to {collection!r} returned no key")

        return key

    @with_httpx
    async def read(self, client: AsyncClient, path: str) -> Record | None:
        resp = await client.get(f"/{path}.json", params=self._params())
        self.check_response(resp, f"Database read of {path!r}")
        return resp.json()

    @with_httpx
    async def query_equal(self, client: AsyncClient, collection: str, field: str, value: str) -> list[tuple[str, Record]]:
        resp = await client.get(f"/{collection}.json", params=self._params(
            orderBy=json.dumps(field),
            equalTo=json.dumps(value),
        ))
        self.check_response(resp, f"Database query of {collection!r} by {field!r}")

        result = resp.json() or {}
        return sorted(result.items())

    @with_httpx
    async def delete(self, client: AsyncClient, path: str) -> None:
        resp = await client.delete(f"/{path}.json", params=self._params())
        self.check_response(resp, f"Database delete of {path!r}")
