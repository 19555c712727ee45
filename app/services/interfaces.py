"""Collaborator interfaces injected into services."""

from collections.abc import Callable
from typing import Protocol, TypeVar

from app.models.core import Permission
from app.models.taxonomy import SearchHit, SubjectCounts

T = TypeVar("T")


class Cache(Protocol):
    """TTL cache whose get() computes each key at most once at a time."""

    def get(self, key: str, ttl: int, compute_fn: Callable[[], T]) -> T: ...

    def invalidate(self, key: str) -> None: ...


class SearchService(Protocol):
    """Search index queries used by taxonomy and featured article services."""

    def get_all_subjects(self, journal: str | None) -> list[str]: ...

    def get_all_subject_counts(self, journal: str | None) -> SubjectCounts: ...

    def get_most_shared_for_journal_category(self, journal: str, category: str) -> SearchHit | None: ...

    def get_most_viewed_for_journal_category(self, journal: str, category: str) -> SearchHit | None: ...

    def get_most_viewed_all_time_for_journal_category(self, journal: str, category: str) -> SearchHit | None: ...


class PermissionChecker(Protocol):
    """Raises PermissionDeniedError when the acting user lacks a permission."""

    def check_permission(self, permission: Permission, auth_id: str | None) -> None: ...
