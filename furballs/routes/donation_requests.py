from fastapi import APIRouter

from furballs.dependencies import DonationRequestsDep
from furballs.models import DonationRequest
from furballs.repositories.donation_requests import ITEM_PLACEHOLDER, GENERAL_ITEMS, OTHER_ITEMS
from furballs.schemas.donation_requests import CreateDonationRequest, DonationRequestCreatedInfo, DonationItemsInfo

router = APIRouter(prefix="/donation-requests")


@router.post("", response_model=DonationRequestCreatedInfo)
async def create_request(repo: DonationRequestsDep, data: CreateDonationRequest):
    key = await repo.submit(DonationRequest(**data.model_dump()))
    return {
        "id": key,
    }


@router.get("/items", response_model=DonationItemsInfo)
async def get_items():
    return {
        "placeholder": ITEM_PLACEHOLDER,
        "general_items": list(GENERAL_ITEMS),
        "other_items": list(OTHER_ITEMS),
    }
