from typing import Annotated

from fastapi import Header, Depends

from furballs.config import AUTH, DATABASE, STORAGE, config
from furballs.repositories.donation_goals import DonationGoalRepository
from furballs.repositories.donation_requests import DonationRequestRepository
from furballs.repositories.gallery import GalleryRepository
from furballs.utils.custom_exception import CustomMessageException


async def firebase_admin_claims(
        authorization: str | None = Header(default=None),
        x_token: str | None = Header(default=None),
) -> dict:
    authorization = authorization or x_token
    if authorization and authorization.lower().startswith("bearer "):
        authorization = authorization[7:].strip()

    if not authorization or (claims := await AUTH.verify_id_token(authorization)) is None:
        raise CustomMessageException("Invalid session.", 401)

    email = (claims.get("email") or "").lower()
    if config.admin_emails and email not in config.admin_emails:
        raise CustomMessageException("Insufficient privileges.", 403)

    return claims


AdminClaimsDepN = Depends(firebase_admin_claims)
AdminClaimsDep = Annotated[dict, AdminClaimsDepN]


def donation_requests_repo() -> DonationRequestRepository:
    return DonationRequestRepository(DATABASE)


def donation_goals_repo() -> DonationGoalRepository:
    return DonationGoalRepository(DATABASE)


def gallery_repo() -> GalleryRepository:
    return GalleryRepository(STORAGE, config.max_photo_size)


DonationRequestsDep = Annotated[DonationRequestRepository, Depends(donation_requests_repo)]
DonationGoalsDep = Annotated[DonationGoalRepository, Depends(donation_goals_repo)]
GalleryDep = Annotated[GalleryRepository, Depends(gallery_repo)]
