from fastapi import APIRouter

from furballs.config import config
from furballs.schemas.donations import PaymentLinkInfo

router = APIRouter(prefix="/donations")


@router.get("/payment-links", response_model=list[PaymentLinkInfo])
async def get_payment_links():
    return [
        {
            "name": name,
            "url": url,
        }
        for name, url in config.payment_links.items()
    ]
