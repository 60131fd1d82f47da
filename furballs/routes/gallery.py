from fastapi import APIRouter, Query

from furballs.config import config
from furballs.dependencies import GalleryDep
from furballs.schemas.gallery import GalleryQuery, GalleryImageInfo

router = APIRouter(prefix="/gallery")


@router.get("", response_model=list[GalleryImageInfo])
async def get_gallery(repo: GalleryDep, query: GalleryQuery = Query()):
    count = config.gallery_slots if query.count is None else min(query.count, config.gallery_slots)
    return [image.to_json() for image in await repo.urls_for_top_n(count)]
