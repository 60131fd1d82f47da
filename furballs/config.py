from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from furballs.stores.auth import FirebaseAuth
from furballs.stores.database import FirebaseDatabase
from furballs.stores.storage import FirebaseStorage


class _Config(BaseSettings):
    is_debug: bool = True
    root_path: str = ""

    firebase_project_id: str = "feeding-the-furballs"
    firebase_api_key: str = ""
    firebase_database_url: str = "https://feeding-the-furballs-default-rtdb.firebaseio.com"
    firebase_storage_bucket: str = "feeding-the-furballs.appspot.com"
    firebase_auth_token: str | None = None
    store_timeout: float = 10

    admin_emails: Annotated[list[str], NoDecode] = []
    cors_origins: Annotated[list[str], NoDecode] = ["*"]

    # External monetary donation pages, name -> url. Json object when set through env.
    payment_links: dict[str, str] = {
        "debit_order": "https://www.feedingthefurballs.org/payment-mandate.php",
        "zapper": (
            "https://www.zapper.com/payWithZapper/?qr=http%3A%2F%2F2.zap.pe%3Ft%3D8%26i%3D18686%3A16856%3A7%5B34"
            "%7C10.00-20.00-50.00-1%7C15%2C61%3A10%5B39%7CZAR%2C38%7CFeeding%20the%20Furballs"
        ),
    }

    max_photo_size: int = 8 * 1024 * 1024
    gallery_slots: int = 48

    @field_validator("firebase_database_url", mode="before")
    def strip_database_url(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("firebase_auth_token", mode="before")
    def set_auth_token_to_none_if_empty(cls, value: str | None) -> str | None:
        return value or None

    @field_validator("admin_emails", mode="before")
    def split_admin_emails(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            value = value.split(",")
        return [email.strip().lower() for email in value if email.strip()]

    @field_validator("cors_origins", mode="before")
    def split_cors_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            value = value.split(",")
        return [origin.strip() for origin in value if origin.strip()]


config = _Config()

DATABASE = FirebaseDatabase(config.firebase_database_url, config.firebase_auth_token, config.store_timeout)
STORAGE = FirebaseStorage(config.firebase_storage_bucket, config.firebase_auth_token, config.store_timeout)
AUTH = FirebaseAuth(config.firebase_project_id, config.firebase_api_key, config.store_timeout)
