from __future__ import annotations

import re
from dataclasses import dataclass

from .text import as_text

MONTHS: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_INT_RE = re.compile(r"[+-]?\d+")


def parse_amount(value: str | None) -> int:
    if value is None or not _INT_RE.fullmatch(value := value.strip()):
        return 0
    return int(value)


@dataclass
class DonationGoal:
    month: str
    monthly_donations: str
    monthly_goal: str

    @classmethod
    def from_record(cls, month: str, record: dict) -> DonationGoal:
        return cls(
            month=record.get("month") or month,
            monthly_donations=as_text(record.get("monthly_donations")),
            monthly_goal=as_text(record.get("monthly_goal")),
        )

    def to_json(self) -> dict:
        return {
            "month": self.month,
            "monthly_donations": self.monthly_donations,
            "monthly_goal": self.monthly_goal,
        }


@dataclass
class GoalProgress:
    month: str
    donations: int
    goal: int
    remaining: int

    @classmethod
    def from_goal(cls, goal: DonationGoal) -> GoalProgress:
        donations = parse_amount(goal.monthly_donations)
        target = parse_amount(goal.monthly_goal)
        return cls(
            month=goal.month,
            donations=donations,
            goal=target,
            remaining=max(target - donations, 0),
        )

    @property
    def donations_share(self) -> float:
        total = max(self.donations, 0) + self.remaining
        return max(self.donations, 0) / total if total else 0.

    @property
    def remaining_share(self) -> float:
        total = max(self.donations, 0) + self.remaining
        return self.remaining / total if total else 0.

    def to_json(self) -> dict:
        return {
            "month": self.month,
            "donations": self.donations,
            "goal": self.goal,
            "remaining": self.remaining,
            "donations_share": self.donations_share,
            "remaining_share": self.remaining_share,
        }
