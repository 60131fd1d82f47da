from fastapi import APIRouter

from furballs.dependencies import AdminClaimsDepN, DonationGoalsDep
from furballs.schemas.admin.donation_goals import SaveDonationGoalRequest
from furballs.schemas.donation_goals import DonationGoalInfo

router = APIRouter(prefix="/donation-goals", dependencies=[AdminClaimsDepN])


@router.get("/{month}", response_model=DonationGoalInfo | None)
async def get_goal(repo: DonationGoalsDep, month: str):
    if (goal := await repo.load(month)) is None:
        return None

    return goal.to_json()


@router.put("/{month}", response_model=DonationGoalInfo)
async def save_goal(repo: DonationGoalsDep, month: str, data: SaveDonationGoalRequest):
    goal = await repo.save(month, data.monthly_donations, data.monthly_goal)
    return goal.to_json()
