"""Tests for role based permission checks."""

import pytest

from app.errors import PermissionDeniedError
from app.models.core import Permission
from app.repositories.core import PermissionRepository


@pytest.fixture
def repo(db):
    return PermissionRepository(db)


class TestHasPermission:
    def test_granted_through_role(self, repo):
        assert repo.has_permission(Permission.MANAGE_FEATURED_ARTICLES, "admin-auth")
        assert repo.has_permission(Permission.MANAGE_CACHES, "admin-auth")

    def test_permission_not_in_role(self, repo):
        assert not repo.has_permission(Permission.ACCESS_ADMIN, "admin-auth")

    def test_user_without_roles(self, repo):
        assert not repo.has_permission(Permission.MANAGE_FEATURED_ARTICLES, "reader-auth")

    @pytest.mark.parametrize("auth_id", [None, "", "ghost-auth"])
    def test_unknown_user(self, repo, auth_id):
        assert not repo.has_permission(Permission.MANAGE_CACHES, auth_id)


class TestCheckPermission:
    def test_allowed(self, repo):
        repo.check_permission(Permission.MANAGE_CACHES, "admin-auth")

    def test_denied(self, repo):
        with pytest.raises(PermissionDeniedError) as exc:
            repo.check_permission(Permission.MANAGE_CACHES, "reader-auth")
        assert exc.value.auth_id == "reader-auth"

    def test_anonymous_denied(self, repo):
        with pytest.raises(PermissionDeniedError):
            repo.check_permission(Permission.MANAGE_FEATURED_ARTICLES, None)
