from ideadrop.models.idea import Idea
from ideadrop.models.user import User

__all__ = ["Idea", "User"]
