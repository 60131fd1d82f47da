import mimetypes
from asyncio import gather
from uuid import uuid4

from loguru import logger

from furballs.errors import ValidationError, UploadError, ListError, FetchError, DeleteError
from furballs.models.gallery_image import GalleryImage, IMAGES_PREFIX
from furballs.stores.base import StoreRequestError
from furballs.stores.storage import FirebaseStorage


def image_name(suggested_name: str | None) -> str:
    # Only the last path component of a client-supplied name is kept
    name = (suggested_name or "").replace("\\", "/").rsplit("/", 1)[-1].strip()
    return name or uuid4().hex


class GalleryRepository:
    def __init__(self, storage: FirebaseStorage, max_size: int) -> None:
        self._storage = storage
        self._max_size = max_size

    async def upload(self, content: bytes, suggested_name: str | None = None) -> str:
        if not content:
            raise ValidationError.single("file", "Image is empty!")
        if len(content) > self._max_size:
            raise ValidationError.single("file", "Maximum file size is exceeded!")

        name = image_name(suggested_name)
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"

        try:
            await self._storage.put(GalleryImage.object_key(name), content, content_type)
        except StoreRequestError as e:
            raise UploadError("Failed to upload image!") from e

        logger.info(f"Gallery image {name!r} uploaded ({len(content)} bytes)")
        return name

    async def list_sorted_descending(self) -> list[str]:
        try:
            keys = await self._storage.list_keys(IMAGES_PREFIX)
        except StoreRequestError as e:
            raise ListError("Failed to fetch image names!") from e

        names = [key[len(IMAGES_PREFIX):] for key in keys if key.startswith(IMAGES_PREFIX)]
        return sorted((name for name in names if name), reverse=True)

    async def url_for(self, name: str) -> str:
        try:
            return await self._storage.url_for(GalleryImage.object_key(name))
        except StoreRequestError as e:
            raise FetchError("Failed to load image!") from e

    async def urls_for_top_n(self, count: int) -> list[GalleryImage]:
        if count <= 0:
            return []

        names = (await self.list_sorted_descending())[:count]
        urls = await gather(
            *(self._storage.url_for(GalleryImage.object_key(name)) for name in names),
            return_exceptions=True,
        )

        result = []
        for name, url in zip(names, urls):
            if isinstance(url, StoreRequestError):
                logger.warning(f"Skipping gallery image {name!r}, failed to resolve url: {url}")
                continue
            if isinstance(url, BaseException):
                raise url
            result.append(GalleryImage(name=name, url=url))

        return result

    async def delete_by_key(self, name: str) -> None:
        try:
            await self._storage.delete(GalleryImage.object_key(name))
        except StoreRequestError as e:
            raise DeleteError("Failed to delete image!") from e

        logger.info(f"Gallery image {name!r} deleted")
