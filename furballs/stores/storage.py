from urllib.parse import quote

from httpx import AsyncClient

from furballs.stores.base import RemoteService, StoreRequestError, with_httpx

FIREBASE_STORAGE_URL = "https://firebasestorage.googleapis.com"


class FirebaseStorage(RemoteService):
    def __init__(self, bucket: str, auth_token: str | None = None, timeout: float = 10) -> None:
        super().__init__(FIREBASE_STORAGE_URL, timeout)
        self.bucket = bucket
        self._auth_token = auth_token

    @property
    def _objects(self) -> str:
        return f"/v0/b/{self.bucket}/o"

    def _object(self, key: str) -> str:
        return f"{self._objects}/{quote(key, safe='')}"

    def _headers(self) -> dict[str, str]:
        if self._auth_token:
            return {"Authorization": f"Firebase {self._auth_token}"}
        return {}

    @with_httpx
    async def put(self, client: AsyncClient, key: str, content: bytes, content_type: str) -> str:
        resp = await client.post(
            self._objects, params={"name": key}, content=content,
            headers={**self._headers(), "Content-Type": content_type},
        )
        self.check_response(resp, f"Storage upload of {key!r}")
        return resp.json().get("name", key)

    @with_httpx
    async def list_keys(self, client: AsyncClient, prefix: str) -> list[str]:
        keys = []
        page_token = None
        while True:
            params = {"prefix": prefix, "delimiter": "/"}
            if page_token:
                params["pageToken"] = page_token

            resp = await client.get(self._objects, params=params, headers=self._headers())
            self.check_response(resp, f"Storage listing of {prefix!r}")

            j_resp = resp.json()
            keys.extend(item["name"] for item in j_resp.get("items", []))
            if not (page_token := j_resp.get("nextPageToken")):
                break

        return keys

    @with_httpx
    async def url_for(self, client: AsyncClient, key: str) -> str:
        resp = await client.get(self._object(key), headers=self._headers())
        self.check_response(resp, f"Storage metadata of {key!r}")

        tokens = resp.json().get("downloadTokens")
        if not tokens:
            raise StoreRequestError(f"Object {key!r} has no download token")

        token = tokens.split(",")[0]
        return f"{self.base_url}{self._object(key)}?alt=media&token={token}"

    @with_httpx
    async def delete(self, client: AsyncClient, key: str) -> None:
        resp = await client.delete(self._object(key), headers=self._headers())
        self.check_response(resp, f"Storage delete of {key!r}")
