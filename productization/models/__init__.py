from productization.models.refresh_token import RefreshToken
from productization.models.user import User

__all__ = ["RefreshToken", "User"]
