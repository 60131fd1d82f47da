from fastapi import APIRouter, UploadFile, File, Form

from furballs.dependencies import AdminClaimsDepN, GalleryDep
from furballs.schemas.admin.gallery import GalleryImageUploaded
from furballs.schemas.gallery import GalleryImageInfo

router = APIRouter(prefix="/gallery", dependencies=[AdminClaimsDepN])


@router.get("", response_model=list[str])
async def get_image_names(repo: GalleryDep):
    return await repo.list_sorted_descending()


@router.get("/{name}", response_model=GalleryImageInfo)
async def get_image(repo: GalleryDep, name: str):
    return {
        "name": name,
        "url": await repo.url_for(name),
    }


@router.post("", response_model=GalleryImageUploaded)
async def upload_image(repo: GalleryDep, file: UploadFile = File(), name: str | None = Form(default=None)):
    content = await file.read()
    return {
        "name": await repo.upload(content, name or file.filename),
    }


@router.delete("/{name}", status_code=204)
async def delete_image(repo: GalleryDep, name: str):
    await repo.delete_by_key(name)
