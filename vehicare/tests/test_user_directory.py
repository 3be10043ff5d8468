from __future__ import annotations

import pytest

from conftest import FakeClock
from vehicare.application.services.password_hashing import WerkzeugPasswordHasher
from vehicare.application.services.user_directory import UserDirectory
from vehicare.infrastructure.repositories.memory import InMemoryStore, InMemoryUserRepository
from vehicare.shared.errors import InfrastructureError, UniqueViolationError


def test_create_normalises_email_and_hashes_password(
    directory: UserDirectory, clock: FakeClock
) -> None:
    user = directory.create("Jane.Doe@Example.COM", "secret1", "Jane", "Doe")

    assert user.id == 1
    assert user.email == "jane.doe@example.com"
    assert user.password_hash == "hashed:secret1"
    assert user.created_at == clock.now
    assert user.last_login_at is None
    assert user.is_active is True


def test_ids_are_unique_and_increasing(directory: UserDirectory) -> None:
    first = directory.create("a@example.com", "secret1", "A", "A")
    second = directory.create("b@example.com", "secret1", "B", "B")

    assert (first.id, second.id) == (1, 2)


def test_find_by_email_is_case_insensitive(directory: UserDirectory) -> None:
    created = directory.create("jane@example.com", "secret1", "Jane", "Doe")

    assert directory.find_by_email("JANE@EXAMPLE.COM") == created
    assert directory.find_by_email("missing@example.com") is None


def test_find_by_id(directory: UserDirectory) -> None:
    created = directory.create("jane@example.com", "secret1", "Jane", "Doe")

    assert directory.find_by_id(created.id) == created
    assert directory.find_by_id(999) is None


def test_duplicate_email_rejected_by_store(directory: UserDirectory) -> None:
    directory.create("jane@example.com", "secret1", "Jane", "Doe")

    with pytest.raises(UniqueViolationError) as exc_info:
        directory.create("JANE@example.com", "secret2", "Other", "Person")

    assert isinstance(exc_info.value, InfrastructureError)
    assert exc_info.value.context == {"field": "email"}


def test_verify_password(directory: UserDirectory) -> None:
    user = directory.create("jane@example.com", "secret1", "Jane", "Doe")

    assert directory.verify_password("secret1", user.password_hash) is True
    assert directory.verify_password("wrong", user.password_hash) is False


def test_verify_password_with_real_hasher_never_raises(clock: FakeClock) -> None:
    directory = UserDirectory(
        users=InMemoryUserRepository(InMemoryStore()),
        password_hasher=WerkzeugPasswordHasher(),
        clock=clock,
    )
    user = directory.create("jane@example.com", "secret1", "Jane", "Doe")

    assert user.password_hash != "secret1"
    assert directory.verify_password("secret1", user.password_hash) is True
    assert directory.verify_password("secret2", user.password_hash) is False
    assert directory.verify_password("secret1", "not-a-hash") is False


def test_touch_last_login_sets_timestamp(directory: UserDirectory, clock: FakeClock) -> None:
    user = directory.create("jane@example.com", "secret1", "Jane", "Doe")
    later = clock.advance(hours=2)

    touched = directory.touch_last_login(user.id)

    assert touched is not None
    assert touched.last_login_at == later
    assert directory.find_by_id(user.id).last_login_at == later


def test_touch_last_login_unknown_id_is_noop(directory: UserDirectory) -> None:
    assert directory.touch_last_login(42) is None
