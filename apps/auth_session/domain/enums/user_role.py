"""User Role Enum."""

from enum import Enum


class UserRole(str, Enum):
    """사용자 권한.

    토큰의 role 클레임으로 전달되며 rotation 시 그대로 유지됩니다.
    """

    ADMIN = "admin"
    USER = "user"
