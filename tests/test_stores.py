import pytest

from furballs.config import AUTH, DATABASE, STORAGE, config
from furballs.stores.base import StoreRequestError
from furballs.stores.database import FirebaseDatabase, node_path
from furballs.stores.storage import FirebaseStorage
from tests.firebase_mock import FirebaseMockState


def test_node_path():
    assert node_path("donations") == "donations"
    assert node_path("donation_goals", "March") == "donation_goals/March"
    assert node_path("donations", "-N0000000001") == "donations/-N0000000001"
    assert node_path("donations", "Alice Smith") == "donations/Alice%20Smith"


@pytest.mark.parametrize("segment", ["", "a.b", "a#b", "a$b", "a[0]", "a/b"])
def test_node_path_invalid(segment: str):
    with pytest.raises(ValueError):
        node_path("donations", segment)


@pytest.mark.asyncio
async def test_database_operations(firebase: FirebaseMockState):
    key = await DATABASE.push("donations", {"name": "Alice"})
    await DATABASE.write(node_path("donation_goals", "May"), {"month": "May"})

    assert await DATABASE.read(node_path("donations", key)) == {"name": "Alice"}
    assert await DATABASE.read("donation_goals") == {"May": {"month": "May"}}
    assert await DATABASE.read(node_path("nothing", "here")) is None

    await DATABASE.push("donations", {"name": "Bob"})
    assert await DATABASE.query_equal("donations", "name", "Alice") == [(key, {"name": "Alice"})]
    assert await DATABASE.query_equal("donations", "name", "Carol") == []

    await DATABASE.delete(node_path("donations", key))
    assert await DATABASE.read(node_path("donations", key)) is None

    for request in firebase.requests:
        assert request.url.params["auth"] == config.firebase_auth_token


@pytest.mark.asyncio
async def test_database_without_credentials(firebase: FirebaseMockState):
    database = FirebaseDatabase(config.firebase_database_url)

    with pytest.raises(StoreRequestError) as exc_info:
        await database.read("donations")

    assert exc_info.value.status_code == 401
    assert "auth" not in firebase.requests[0].url.params


@pytest.mark.asyncio
async def test_database_connection_error(firebase: FirebaseMockState):
    firebase.fail("GET", r"/donations\.json", connection_error=True)

    with pytest.raises(StoreRequestError) as exc_info:
        await DATABASE.read("donations")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_storage_operations(firebase: FirebaseMockState):
    assert await STORAGE.put("images/a b.png", b"123", "image/png") == "images/a b.png"
    await STORAGE.put("images/c.png", b"456", "image/png")

    assert await STORAGE.list_keys("images/") == ["images/a b.png", "images/c.png"]

    url = await STORAGE.url_for("images/a b.png")
    assert url.endswith(f"/o/images%2Fa%20b.png?alt=media&token={firebase.objects['images/a b.png']['token']}")

    await STORAGE.delete("images/a b.png")
    assert await STORAGE.list_keys("images/") == ["images/c.png"]

    for request in firebase.requests:
        assert request.headers["authorization"] == f"Firebase {config.firebase_auth_token}"


@pytest.mark.asyncio
async def test_storage_without_credentials(firebase: FirebaseMockState):
    storage = FirebaseStorage(config.firebase_storage_bucket)

    with pytest.raises(StoreRequestError) as exc_info:
        await storage.list_keys("images/")

    assert exc_info.value.status_code == 403
    assert "authorization" not in firebase.requests[0].headers


@pytest.mark.asyncio
async def test_storage_missing_download_token(firebase: FirebaseMockState):
    await STORAGE.put("images/a.png", b"123", "image/png")
    firebase.objects["images/a.png"]["token"] = ""

    with pytest.raises(StoreRequestError):
        await STORAGE.url_for("images/a.png")


@pytest.mark.asyncio
async def test_database_absent_node_is_none(firebase: FirebaseMockState):
    assert await DATABASE.read(node_path("donation_goals", "March")) is None
    assert await DATABASE.query_equal("donations", "name", "Alice") == []

    await DATABASE.delete(node_path("donation_goals", "March"))
    assert firebase.tree == {"donation_goals": {}}


@pytest.mark.asyncio
@pytest.mark.parametrize(("content", "content_type"), [
    (b"<html><body>Sign in to the network</body></html>", "text/html"),
    (b"", "application/json"),
])
async def test_unexpected_success_body(firebase: FirebaseMockState, content: bytes, content_type: str):
    firebase.fail("GET", r"/donations\.json", status_code=200, content=content, content_type=content_type)
    firebase.fail("POST", r"/donations\.json", status_code=200, content=content, content_type=content_type)
    firebase.fail("GET", r"/o\?prefix=", status_code=200, content=content, content_type=content_type)

    with pytest.raises(StoreRequestError):
        await DATABASE.read("donations")
    with pytest.raises(StoreRequestError):
        await DATABASE.push("donations", {"name": "Alice"})
    with pytest.raises(StoreRequestError):
        await STORAGE.list_keys("images/")


@pytest.mark.asyncio
async def test_sign_in_unexpected_body(firebase: FirebaseMockState):
    firebase.fail("POST", r"signInWithPassword", status_code=200, content=b'{"kind": "something"}')

    with pytest.raises(StoreRequestError):
        await AUTH.sign_in("admin@furballs.org", "123456789")
