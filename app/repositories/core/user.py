"""Permission repository - role based permission checks for users."""

from loguru import logger

from app.errors import PermissionDeniedError
from app.models.core import Permission
from app.repositories.base import BaseRepository


class PermissionRepository(BaseRepository):
    """Repository for user role permissions."""

    def has_permission(self, permission: Permission, auth_id: str | None) -> bool:
        """Check whether the user identified by auth_id holds permission through any role."""
        if not auth_id:
            return False

        row = self.fetchone(
            """
            SELECT COUNT(*) FROM user_profile up
            JOIN user_profile_role upr ON upr.user_profile_id = up.user_profile_id
            JOIN user_role_permission urp ON urp.user_role_id = upr.user_role_id
            WHERE up.auth_id = ? AND urp.permission = ?
            """,
            [auth_id, str(permission)],
        )
        return row[0] > 0

    def check_permission(self, permission: Permission, auth_id: str | None) -> None:
        """Raise PermissionDeniedError unless the user holds permission."""
        if not self.has_permission(permission, auth_id):
            logger.warning("Permission {} denied for {}", permission, auth_id)
            raise PermissionDeniedError(str(permission), auth_id)
        logger.debug("Permission {} granted for {}", permission, auth_id)
