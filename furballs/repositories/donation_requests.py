import re

from loguru import logger

from furballs.errors import ValidationError, SaveError, FetchError, DeleteError
from furballs.models import DonationRequest
from furballs.stores.base import StoreRequestError
from furballs.stores.database import FirebaseDatabase, node_path

COLLECTION = "donations"
ITEM_PLACEHOLDER = "Please Select an Item"
GENERAL_ITEMS = (
    "Dog Food", "Cat Food", "Puppy Food", "Kitten Food", "Blankets", "Towels", "Bowls", "Leashes and Collars",
)
OTHER_ITEMS = (
    "Flea and Tick Treatment", "Deworming Tablets", "Cat Litter", "Toys", "Beds", "Cleaning Supplies",
)
CONTACT_RE = re.compile(r"[0-9]{10}")
EMAIL_RE = re.compile(r"[a-zA-Z0-9._-]+@[a-z]+\.+[a-z]+")


def validate(request: DonationRequest) -> None:
    errors = {}

    if not request.name:
        errors["name"] = "Name and surname are required"

    if not request.item or request.item == ITEM_PLACEHOLDER:
        errors["item"] = "Please select an item"

    if not request.contact:
        errors["contact"] = "Contact number is required"
    elif not CONTACT_RE.fullmatch(request.contact):
        errors["contact"] = "Invalid contact number"

    if not request.email:
        errors["email"] = "Email address is required"
    elif not EMAIL_RE.fullmatch(request.email):
        errors["email"] = "Invalid email address"

    if errors:
        raise ValidationError(errors)


class DonationRequestRepository:
    def __init__(self, database: FirebaseDatabase) -> None:
        self._db = database

    async def submit(self, request: DonationRequest) -> str:
        request = request.stripped()
        validate(request)

        try:
            key = await self._db.push(COLLECTION, request.to_json())
        except StoreRequestError as e:
            raise SaveError("Failed to send request!") from e

        logger.info(f"Donation request {key!r} submitted for item {request.item!r}")
        return key

    async def list_names(self) -> list[str]:
        try:
            records = await self._db.read(COLLECTION)
        except StoreRequestError as e:
            raise FetchError("Failed to retrieve user names!") from e

        if not records:
            return []

        return [
            record["name"]
            for _, record in sorted(records.items())
            if isinstance(record, dict) and isinstance(record.get("name"), str)
        ]

    async def find_by_name(self, name: str) -> list[tuple[str, DonationRequest]]:
        try:
            matches = await self._db.query_equal(COLLECTION, "name", name)
        except StoreRequestError as e:
            raise FetchError("Failed to retrieve user details!") from e

        return [
            (key, DonationRequest.from_record(record))
            for key, record in matches
            if isinstance(record, dict)
        ]

    async def find_latest_by_name(self, name: str) -> tuple[str, DonationRequest] | None:
        matches = await self.find_by_name(name)
        return matches[-1] if matches else None

    async def delete_by_name(self, name: str) -> int:
        try:
            matches = await self._db.query_equal(COLLECTION, "name", name)
        except StoreRequestError as e:
            raise DeleteError("Failed to delete request!") from e

        deleted = 0
        for key, _ in matches:
            try:
                await self._db.delete(node_path(COLLECTION, key))
            except StoreRequestError as e:
                logger.warning(f"Deleted {deleted} of {len(matches)} donation requests named {name!r} before failure")
                raise DeleteError(f"Failed to delete request! {deleted} of {len(matches)} deleted.", deleted) from e
            deleted += 1

        logger.info(f"Deleted {deleted} donation request(s) named {name!r}")
        return deleted
