from pydantic import BaseModel


class CreateDonationRequest(BaseModel):
    name: str
    item: str
    contact: str
    email: str


class DonationRequestCreatedInfo(BaseModel):
    id: str


class DonationItemsInfo(BaseModel):
    placeholder: str
    general_items: list[str]
    other_items: list[str]
