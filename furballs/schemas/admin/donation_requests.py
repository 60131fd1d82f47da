from pydantic import BaseModel

from furballs.schemas.donation_requests import CreateDonationRequest


class DonationRequestInfo(CreateDonationRequest):
    id: str


class DonationRequestMatches(BaseModel):
    name: str
    result: list[DonationRequestInfo]
    latest: DonationRequestInfo | None


class DonationRequestsDeleted(BaseModel):
    deleted: int
