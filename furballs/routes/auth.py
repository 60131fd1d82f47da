from fastapi import APIRouter
from loguru import logger

from furballs.config import AUTH
from furballs.schemas.auth import LoginRequest, LoginResponse
from furballs.stores.base import StoreRequestError
from furballs.utils.custom_exception import CustomMessageException

router = APIRouter(prefix="/auth")


@router.post("/login", response_model=LoginResponse)
async def login(data: LoginRequest):
    try:
        result = await AUTH.sign_in(str(data.email), data.password)
    except StoreRequestError as e:
        raise CustomMessageException("Login failed!", 502) from e

    if result is None:
        raise CustomMessageException("Login failed!")

    token, expires_at = result
    logger.info(f"Admin {data.email} logged in")

    return {
        "token": token,
        "expires_at": expires_at,
    }
