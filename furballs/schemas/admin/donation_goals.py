from pydantic import BaseModel


class SaveDonationGoalRequest(BaseModel):
    monthly_donations: str
    monthly_goal: str
