from dataclasses import dataclass, field
from datetime import date as Date
from typing import Optional, Tuple


@dataclass(frozen=True)
class ListingSummary():
    title: str = ""
    price: str = ""
    href: str = ""


@dataclass(frozen=True)
class ListingDetail():
    id: str = ""
    date: Optional[Date] = None
    title: str = ""
    district: str = ""
    area: str = ""
    rooms: str = ""
    floor: str = ""
    max_floor: str = ""
    description: str = ""
    seller: str = ""
    photos: Tuple[str, ...] = field(default_factory=tuple)
    props: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)


@dataclass
class Offer():
    price: str = ""
    href: str = ""
    id: str = ""
    date: Optional[Date] = None
    title: str = ""
    district: str = ""
    area: str = ""
    rooms: str = ""
    floor: str = ""
    max_floor: str = ""
    description: str = ""
    seller: str = ""
    photos: Tuple[str, ...] = field(default_factory=tuple)
    props: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def merge(cls, price: str, href: str, detail: ListingDetail) -> "Offer":
        return cls(price=price, href=href, **vars(detail))

    @property
    def photos_string(self) -> str:
        return "|".join(self.photos)

    @property
    def props_string(self) -> str:
        return "\n".join(f"{label}: {value}" for label, value in self.props)
