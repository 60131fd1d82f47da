from __future__ import annotations

from dataclasses import dataclass, asdict

from .text import as_text


@dataclass
class DonationRequest:
    name: str
    item: str
    contact: str
    email: str

    @classmethod
    def from_record(cls, record: dict) -> DonationRequest:
        return cls(
            name=as_text(record.get("name")),
            item=as_text(record.get("item")),
            contact=as_text(record.get("contact")),
            email=as_text(record.get("email")),
        )

    def stripped(self) -> DonationRequest:
        return DonationRequest(
            name=self.name.strip(),
            item=self.item.strip(),
            contact=self.contact.strip(),
            email=self.email.strip(),
        )

    def to_json(self) -> dict:
        return asdict(self)
