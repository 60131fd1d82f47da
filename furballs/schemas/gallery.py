from pydantic import BaseModel, Field


class GalleryQuery(BaseModel):
    count: int | None = Field(default=None, ge=0)


class GalleryImageInfo(BaseModel):
    name: str
    url: str
