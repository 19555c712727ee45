"""Tests for flagging article categories."""

import time

import pytest

from app.repositories.taxonomy import FlagRepository
from app.services.taxonomy import FlagService


@pytest.fixture
def repo(db):
    return FlagRepository(db)


@pytest.fixture
def service(repo):
    return FlagService(repo)


class TestFlag:
    def test_identified_flag_is_idempotent(self, service, repo):
        service.flag_taxonomy_term(10, 7, "reader-auth")
        first = repo.get_last_modified(10, 7, "reader-auth")
        time.sleep(0.01)
        service.flag_taxonomy_term(10, 7, "reader-auth")

        assert service.count_flags(10, 7) == 1
        assert repo.get_last_modified(10, 7, "reader-auth") > first

    def test_anonymous_flags_accumulate(self, service):
        service.flag_taxonomy_term(10, 7)
        service.flag_taxonomy_term(10, 7, "")
        assert service.count_flags(10, 7) == 2

    def test_users_flag_independently(self, service, repo):
        service.flag_taxonomy_term(10, 7, "reader-auth")
        service.flag_taxonomy_term(10, 7, "other-auth")
        service.flag_taxonomy_term(10, 7)
        assert service.count_flags(10, 7) == 3
        assert repo.count(10, 7, "reader-auth") == 1

    def test_unknown_user_adds_nothing(self, service):
        service.flag_taxonomy_term(10, 7, "ghost-auth")
        assert service.count_flags(10, 7) == 0

    def test_pairs_are_separate(self, service):
        service.flag_taxonomy_term(10, 7, "reader-auth")
        service.flag_taxonomy_term(10, 8, "reader-auth")
        assert service.count_flags(10, 7) == 1
        assert service.count_flags(10, 8) == 1


class TestDeflag:
    def test_identified_removes_only_own_flag(self, service, repo):
        service.flag_taxonomy_term(10, 7, "reader-auth")
        service.flag_taxonomy_term(10, 7, "other-auth")
        service.flag_taxonomy_term(10, 7)

        service.deflag_taxonomy_term(10, 7, "reader-auth")

        assert repo.count(10, 7, "reader-auth") == 0
        assert service.count_flags(10, 7) == 2

    def test_identified_without_flag(self, service):
        service.flag_taxonomy_term(10, 7)
        service.deflag_taxonomy_term(10, 7, "reader-auth")
        assert service.count_flags(10, 7) == 1

    def test_anonymous_removes_exactly_one(self, service, repo):
        for _ in range(3):
            service.flag_taxonomy_term(10, 7)
        service.flag_taxonomy_term(10, 7, "reader-auth")

        service.deflag_taxonomy_term(10, 7)

        assert service.count_flags(10, 7) == 3
        assert repo.count(10, 7, "reader-auth") == 1

    def test_anonymous_without_flags(self, service, repo):
        service.flag_taxonomy_term(10, 7, "reader-auth")
        assert repo.delete_one_anonymous(10, 7) == 0
        assert service.count_flags(10, 7) == 1

    def test_anonymous_repository_counts(self, repo):
        repo.insert_anonymous(10, 7)
        repo.insert_anonymous(10, 7)
        assert repo.delete_one_anonymous(10, 7) == 1
        assert repo.delete_one_anonymous(10, 7) == 1
        assert repo.delete_one_anonymous(10, 7) == 0
