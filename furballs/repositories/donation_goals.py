from datetime import datetime
from typing import Callable

from loguru import logger
from pytz import UTC

from furballs.errors import ValidationError, SaveError, FetchError
from furballs.models import DonationGoal, GoalProgress, MONTHS
from furballs.stores.base import StoreRequestError
from furballs.stores.database import FirebaseDatabase, node_path

COLLECTION = "donation_goals"

Clock = Callable[[], datetime]


def current_month_name(clock: Clock | None = None) -> str:
    now = clock() if clock is not None else datetime.now(UTC)
    return MONTHS[now.month - 1]


def normalize_month(month: str) -> str:
    if (month := month.strip().capitalize()) not in MONTHS:
        raise ValidationError.single("month", f"Unknown month: {month!r}")
    return month


class DonationGoalRepository:
    def __init__(self, database: FirebaseDatabase) -> None:
        self._db = database

    async def save(self, month: str, monthly_donations: str, monthly_goal: str) -> DonationGoal:
        month = normalize_month(month)
        goal = DonationGoal(month=month, monthly_donations=monthly_donations.strip(), monthly_goal=monthly_goal.strip())

        if not goal.monthly_donations:
            raise ValidationError.single("monthly_donations", "Please enter the total monthly donations!")
        if not goal.monthly_goal:
            raise ValidationError.single("monthly_goal", "Please enter the monthly goal!")

        try:
            await self._db.write(node_path(COLLECTION, month), goal.to_json())
        except StoreRequestError as e:
            raise SaveError("Failed to upload goals!") from e

        logger.info(f"Donation goal for {month} saved: {goal.monthly_donations!r}/{goal.monthly_goal!r}")
        return goal

    async def load(self, month: str) -> DonationGoal | None:
        month = normalize_month(month)

        try:
            record = await self._db.read(node_path(COLLECTION, month))
        except StoreRequestError as e:
            raise FetchError("Error fetching data!") from e

        if not isinstance(record, dict):
            return None

        return DonationGoal.from_record(month, record)

    @staticmethod
    def current_month_name(clock: Clock | None = None) -> str:
        return current_month_name(clock)

    @staticmethod
    def progress(goal: DonationGoal) -> GoalProgress:
        return GoalProgress.from_goal(goal)
