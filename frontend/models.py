"""
Client-side data models

Records arrive from the server as plain dicts and are kept that way; the
models here cover what the client itself builds (forms, orders) and the
closed sets it switches on (roles, views).
"""
import datetime
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

CATEGORIES = ("Digital", "Painting", "Sculpture")


class Role(str, Enum):
    BUYER = "buyer"
    ARTIST = "artist"
    CURATOR = "curator"

    @classmethod
    def of(cls, user: Optional[Dict[str, Any]]) -> Optional["Role"]:
        """Role of a user record, None for a missing user or a role string outside the set"""
        if not user:
            return None
        try:
            return cls(user.get("role"))
        except ValueError:
            return None


class View(str, Enum):
    GALLERY = "gallery"
    PROFILE = "profile"
    DASHBOARD = "dashboard"


class SignupForm(BaseModel):
    """Fields collected by the sign-up screen"""
    email: str
    password: str
    name: str
    role: str = Role.BUYER.value
    address: str = ""
    phone: str = ""
    bio: str = ""


class ArtworkForm(BaseModel):
    """Fields collected by the artist studio"""
    title: str
    price: Union[int, float]
    category: str = Field(default=CATEGORIES[0])


class Order(BaseModel):
    """
    Snapshot of an artwork at purchase time
    Later changes to the artwork do not reach past orders
    """
    id: int
    title: Any = None
    price: Any = None
    date: str
    img: Any = None

    @classmethod
    def from_artwork(cls, artwork: Dict[str, Any], purchased_on: Optional[datetime.date] = None) -> "Order":
        return cls(
            id=int(time.time() * 1000),
            title=artwork.get("title"),
            price=artwork.get("price"),
            date=format_purchase_date(purchased_on or datetime.date.today()),
            img=artwork.get("img"),
        )


def format_purchase_date(day: datetime.date) -> str:
    """Short US date, e.g. 3/7/2026"""
    return f"{day.month}/{day.day}/{day.year}"


@dataclass
class Notification:
    """Toast message shown until expires_at (monotonic seconds)"""
    message: str
    expires_at: float

    def is_active(self, now: Optional[float] = None) -> bool:
        return (time.monotonic() if now is None else now) < self.expires_at
