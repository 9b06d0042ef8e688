from pydantic_schemas.auth_request import AuthRequest
from pydantic_schemas.post import Post
from pydantic_schemas.user import User

__all__ = ["AuthRequest", "Post", "User"]
