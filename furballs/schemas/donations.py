from pydantic import BaseModel


class PaymentLinkInfo(BaseModel):
    name: str
    url: str
