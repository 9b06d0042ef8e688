from typing import Optional

from pydantic_schemas.base import Entity
from utils.clock import to_instant_string


class Post(Entity):
    id: Optional[int] = None
    user_id: Optional[int] = None
    type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    contact: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    username: Optional[str] = None

    def missing_required(self) -> bool:
        """True when any of userId, type, title, lat, lng is absent (or blank, for text)."""
        return (
            _is_blank(self.title)
            or _is_blank(self.type)
            or self.lat is None
            or self.lng is None
            or self.user_id is None
        )

    @classmethod
    def from_row(cls, row: dict) -> "Post":
        created_at = row.get('created_at')
        return cls(
            id=row.get('id'),
            user_id=row.get('user_id'),
            type=row.get('type'),
            title=row.get('title'),
            description=row.get('description'),
            lat=row.get('lat'),
            lng=row.get('lng'),
            contact=row.get('contact'),
            status=row.get('status'),
            created_at=to_instant_string(created_at) if created_at is not None else None,
        )


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()
