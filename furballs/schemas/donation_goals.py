from pydantic import BaseModel


class DonationGoalInfo(BaseModel):
    month: str
    monthly_donations: str
    monthly_goal: str


class GoalProgressInfo(BaseModel):
    month: str
    donations: int
    goal: int
    remaining: int
    donations_share: float
    remaining_share: float


class MonthGoalInfo(BaseModel):
    month: str
    goal: DonationGoalInfo | None
    progress: GoalProgressInfo | None


class MonthsInfo(BaseModel):
    months: list[str]
    current: str
