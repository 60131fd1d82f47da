from pydantic import BaseModel


class GalleryImageUploaded(BaseModel):
    name: str
