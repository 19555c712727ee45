"""Shared fixtures: in-memory database and collaborator fakes."""

from datetime import date

import duckdb
import pytest

from app.errors import PermissionDeniedError
from app.models.taxonomy import SearchHit, SubjectCounts
from app.repositories.db import init_tables
from solr_client import SearchError


class FakeSearch:
    """Search collaborator recording every call."""

    def __init__(self):
        self.subjects: list[str] = []
        self.counts: dict[str, int] = {}
        self.total = 0
        self.shared: SearchHit | None = None
        self.viewed: SearchHit | None = None
        self.viewed_all_time: SearchHit | None = None
        self.error: SearchError | None = None
        self.calls: list[tuple] = []

    def _call(self, name: str, *args):
        self.calls.append((name, *args))
        if self.error is not None:
            raise self.error

    def called(self, name: str) -> int:
        return sum(1 for c in self.calls if c[0] == name)

    def get_all_subjects(self, journal):
        self._call("get_all_subjects", journal)
        return list(self.subjects)

    def get_all_subject_counts(self, journal):
        self._call("get_all_subject_counts", journal)
        return SubjectCounts(subject_counts=dict(self.counts), total_articles=self.total)

    def get_most_shared_for_journal_category(self, journal, category):
        self._call("shared", journal, category)
        return self.shared

    def get_most_viewed_for_journal_category(self, journal, category):
        self._call("viewed", journal, category)
        return self.viewed

    def get_most_viewed_all_time_for_journal_category(self, journal, category):
        self._call("viewed_all_time", journal, category)
        return self.viewed_all_time


class FakePermissions:
    """Permission checker granting everything to the listed users."""

    def __init__(self, allowed: set[str] | None = None):
        self.allowed = allowed if allowed is not None else {"admin-auth"}
        self.checks: list[tuple] = []

    def check_permission(self, permission, auth_id):
        self.checks.append((permission, auth_id))
        if auth_id not in self.allowed:
            raise PermissionDeniedError(str(permission), auth_id)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def fake_search() -> FakeSearch:
    return FakeSearch()


@pytest.fixture
def fake_permissions() -> FakePermissions:
    return FakePermissions()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def db():
    """In-memory database with two journals, three articles and three users."""
    conn = duckdb.connect(":memory:")
    init_tables(conn)

    conn.execute("INSERT INTO journal VALUES (1, 'PLoSONE', 'PLOS ONE'), (2, 'PLoSBiology', 'PLOS Biology')")
    conn.executemany(
        "INSERT INTO article VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
        [
            [10, "info:doi/10.1371/journal.pone.0000010", "Gene drift", "Drift END_TITLE in small populations",
             None, "img/10.png", date(2024, 1, 10), 0, "19", "3"],
            [11, "info:doi/10.1371/journal.pone.0000011", "Coral reefs", "Reef decline",
             "CC0", "img/11.png", date(2024, 2, 1), 0, "19", "4"],
            [12, "info:doi/10.1371/journal.pone.0000012", "Withdrawn", "Not public",
             None, None, date(2024, 2, 2), 1, None, None],
        ],
    )
    conn.execute("INSERT INTO article_journal VALUES (10, 1), (11, 1), (12, 1)")
    conn.execute(
        "INSERT INTO article_author VALUES (10, 0, 'Ada Lovelace'), (10, 1, 'Charles Babbage'), (11, 0, 'Rachel Carson')"
    )
    conn.execute(
        "INSERT INTO article_category VALUES (10, 'Biology', 'Genetics'), (11, 'Biology', 'Ecology'), "
        "(11, 'Earth sciences', NULL)"
    )
    conn.execute("INSERT INTO article_representation VALUES (10, 'XML'), (10, 'PDF')")

    conn.execute(
        "INSERT INTO user_profile VALUES (100, 'admin-auth', 'Admin'), (101, 'reader-auth', 'Reader'), "
        "(102, 'other-auth', 'Other')"
    )
    conn.execute("INSERT INTO user_role VALUES (1, 'admin')")
    conn.execute("INSERT INTO user_role_permission VALUES (1, 'MANAGE_FEATURED_ARTICLES'), (1, 'MANAGE_CACHES')")
    conn.execute("INSERT INTO user_profile_role VALUES (100, 1)")

    yield conn
    conn.close()
