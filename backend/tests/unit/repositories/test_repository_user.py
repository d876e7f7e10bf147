"""Unit tests for UserRepository."""

import pytest

from authservice.repositories.user import UserRepository
from tests.factories.user import UserFactory


class TestUserRepository:
    """Ensure ``UserRepository`` performs core persistence operations."""

    @pytest.fixture()
    def repo(self):
        return UserRepository()

    def test_add_assigns_id(self, repo, session):
        u = UserFactory.build(email="new@example.com")
        u.password = "pw"
        repo.add(u)
        assert u.id is not None

    def test_create_and_get_user(self, repo, session):
        """Create a user and fetch it by email to verify retrieval."""
        u = UserFactory(email="alice@example.com", first_name="Alice")
        session.commit()

        fetched = repo.get_by_email("  ALICE@example.com ")
        assert fetched is not None
        assert fetched.id == u.id
        assert fetched.first_name == "Alice"
        assert repo.get(u.id) is fetched

    def test_exists_by_email(self, repo, session):
        """Return existence flags for known and unknown email addresses."""
        UserFactory(email="bob@example.com")
        session.commit()

        assert repo.exists_by_email("bob@example.com")
        assert not repo.exists_by_email("nonexistent@example.com")

    def test_find_one_ignores_unknown_filters(self, repo, session):
        u = UserFactory(email="carol@example.com")
        session.commit()

        assert repo.find_one(email="carol@example.com", password_hash="x") is u
        assert repo.exists(role="customer")
        assert not repo.exists(role="admin")
