from typing import Optional

from pydantic_schemas.base import Entity


class AuthRequest(Entity):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    phone: Optional[str] = None
