from typing import Optional

from pydantic_schemas.base import Entity


class User(Entity):
    id: Optional[int] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
    rating: Optional[float] = None
    rating_count: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "User":
        """Build a User from a users row; columns the query did not select stay None."""
        return cls(
            id=row.get('id'),
            username=row.get('username'),
            email=row.get('email'),
            password=row.get('password'),
            phone=row.get('phone'),
            rating=row.get('rating'),
            rating_count=row.get('rating_count'),
        )
