from fastapi import APIRouter

from furballs.dependencies import AdminClaimsDepN, DonationRequestsDep
from furballs.schemas.admin.donation_requests import DonationRequestMatches, DonationRequestsDeleted
from furballs.utils.custom_exception import CustomMessageException

router = APIRouter(prefix="/donation-requests", dependencies=[AdminClaimsDepN])


@router.get("", response_model=list[str])
async def get_request_names(repo: DonationRequestsDep):
    return await repo.list_names()


@router.get("/{name}", response_model=DonationRequestMatches)
async def get_requests_by_name(repo: DonationRequestsDep, name: str):
    matches = await repo.find_by_name(name)
    if not matches:
        raise CustomMessageException("No data found for user!", 404)

    result = [{"id": key, **request.to_json()} for key, request in matches]
    return {
        "name": name,
        "result": result,
        "latest": result[-1],
    }


@router.delete("/{name}", response_model=DonationRequestsDeleted)
async def delete_requests_by_name(repo: DonationRequestsDep, name: str):
    return {
        "deleted": await repo.delete_by_name(name),
    }
