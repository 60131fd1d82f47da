from fastapi import APIRouter

from furballs.dependencies import DonationGoalsDep
from furballs.models import MONTHS
from furballs.repositories.donation_goals import current_month_name
from furballs.schemas.donation_goals import MonthGoalInfo, MonthsInfo

router = APIRouter(prefix="/donation-goals")


@router.get("/months", response_model=MonthsInfo)
async def get_months():
    return {
        "months": list(MONTHS),
        "current": current_month_name(),
    }


@router.get("/{month}", response_model=MonthGoalInfo)
async def get_month_goal(repo: DonationGoalsDep, month: str):
    if (goal := await repo.load(month)) is None:
        return {
            "month": month.strip().capitalize(),
            "goal": None,
            "progress": None,
        }

    return {
        "month": goal.month,
        "goal": goal.to_json(),
        "progress": repo.progress(goal).to_json(),
    }
