from authservice.models.refresh_token import RefreshToken
from authservice.models.user import Role, User

__all__ = [
    "RefreshToken",
    "Role",
    "User",
]
