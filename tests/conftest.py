from os import environ
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from pytest_httpx import HTTPXMock

FIREBASE_PROJECT_ID = "furballs-test"
ADMIN_EMAIL = "admin@furballs.org"

environ["firebase_project_id"] = FIREBASE_PROJECT_ID
environ["firebase_api_key"] = "test-api-key"
environ["firebase_database_url"] = f"https://{FIREBASE_PROJECT_ID}.firebaseio.local/"
environ["firebase_storage_bucket"] = f"{FIREBASE_PROJECT_ID}.appspot.com"
environ["firebase_auth_token"] = "test-server-token"
environ["admin_emails"] = f"{ADMIN_EMAIL.upper()}, "

from furballs.config import AUTH
from furballs.main import app
from tests.firebase_mock import FirebaseMockState

IMG_1x1_PIXEL_RED = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010802000000907753"
    "de000000017352474200aece1ce90000000c49444154185763f8cfc000000301"
    "0100632455d30000000049454e44ae426082"
)


@pytest.fixture
def firebase(httpx_mock: HTTPXMock) -> FirebaseMockState:
    state = FirebaseMockState()
    httpx_mock.add_callback(state.callback, is_reusable=True, is_optional=True)
    AUTH.reset_certs()
    return state


@pytest_asyncio.fixture
async def client(firebase: FirebaseMockState) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="https://furballs.org") as client:
        yield client


def create_token(firebase: FirebaseMockState, email: str = ADMIN_EMAIL, **claims) -> str:
    return firebase.id_token_for(email, **claims)


def admin_headers(firebase: FirebaseMockState) -> dict[str, str]:
    return {"authorization": f"Bearer {create_token(firebase)}"}
