from time import time

from httpx import AsyncClient
from loguru import logger

from furballs.stores.base import RemoteService, StoreRequestError, with_httpx
from furballs.utils.jwt import JWT

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com"
SIGN_IN_PATH = "/v1/accounts:signInWithPassword"
# Public certificates used to sign Firebase ID tokens.
SECURETOKEN_CERTS_URL = "https://www.googleapis.com/robot/v1/metadata/x509/securetoken@system.gserviceaccount.com"
CERTS_TTL = 60 * 60


class FirebaseAuth(RemoteService):
    def __init__(self, project_id: str, api_key: str, timeout: float = 10) -> None:
        super().__init__(IDENTITY_TOOLKIT_URL, timeout)
        self.project_id = project_id
        self._api_key = api_key
        self._certs: dict[str, str] | None = None
        self._certs_fetched_at = 0.

    @property
    def issuer(self) -> str:
        return f"https://securetoken.google.com/{self.project_id}"

    def reset_certs(self) -> None:
        self._certs = None
        self._certs_fetched_at = 0.

    @with_httpx
    async def sign_in(self, client: AsyncClient, email: str, password: str) -> tuple[str, int] | None:
        resp = await client.post(SIGN_IN_PATH, params={"key": self._api_key}, json={
            "email": email,
            "password": password,
            "returnSecureToken": True,
        })
        logger.debug(f"Firebase sign in response, code={resp.status_code!r}")

        if resp.status_code == 400:
            return None
        self.check_response(resp, "Firebase sign in")

        j_resp = resp.json()
        return j_resp["idToken"], int(time()) + int(j_resp["expiresIn"])

    @with_httpx
    async def _fetch_certs(self, client: AsyncClient) -> dict[str, str]:
        resp = await client.get(SECURETOKEN_CERTS_URL)
        self.check_response(resp, "Securetoken certificates fetch")
        return resp.json()

    async def certs(self) -> dict[str, str]:
        if self._certs is None or self._certs_fetched_at + CERTS_TTL < time():
            self._certs = await self._fetch_certs()
            self._certs_fetched_at = time()

        return self._certs

    async def verify_id_token(self, id_token: str) -> dict[str, ...] | None:
        """Verifies a Firebase ID token and returns its claims.

        Args:
            id_token: The encoded token sent by the client.

        Returns:
            The decoded claims, or None if the signature, audience, issuer or expiry is invalid
            or the signing certificates cannot be fetched.
        """
        try:
            certs = await self.certs()
        except StoreRequestError:
            return None

        if (claims := JWT.decode(id_token, certs)) is None:
            return None
        if claims.get("aud") != self.project_id or claims.get("iss") != self.issuer:
            return None
        if not claims.get("sub"):
            return None

        return claims
