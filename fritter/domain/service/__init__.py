"""Domain services."""

from .base import Service
from .content_service import ContentService
from .credibility_service import Credibility, CredibilityService
from .filter_service import FilterService
from .follow_service import FollowService
from .freet_service import FreetService
from .jwt_service import JWTService
from .password_service import PasswordService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "ContentService",
    "Credibility",
    "CredibilityService",
    "FilterService",
    "FollowService",
    "FreetService",
    "JWTService",
    "PasswordService",
    "Service",
    "TagService",
    "UserService",
]
