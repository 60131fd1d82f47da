from dataclasses import dataclass

IMAGES_PREFIX = "images/"


@dataclass
class GalleryImage:
    name: str
    url: str

    @staticmethod
    def object_key(name: str) -> str:
        return f"{IMAGES_PREFIX}{name}"

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "url": self.url,
        }
