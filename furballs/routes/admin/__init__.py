from fastapi import APIRouter

from furballs.routes.admin import donation_requests, donation_goals, gallery

router = APIRouter(prefix="/admin")
router.include_router(donation_requests.router)
router.include_router(donation_goals.router)
router.include_router(gallery.router)
