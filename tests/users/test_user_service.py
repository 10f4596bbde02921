from __future__ import annotations

import pytest

from src.school_fees.school_fees.core.enums import Role
from src.school_fees.school_fees.core.exceptions import AuthenticationError, ValidationError


def _user(**overrides):
    data = {"username": "accounts", "password": "s3cret!", "role": "Accountant", "full_name": "Accounts Desk"}
    data.update(overrides)
    return data


def test_create_user_hashes_password(container):
    user = container.user_service.create_user(_user())

    assert user.role == Role.ACCOUNTANT
    assert user.password_hash != "s3cret!"
    assert container.user_service.get_by_username("accounts") == user
    assert container.auth_service.authenticate("accounts", "s3cret!") == user


def test_update_user_merges_and_rehashes(container):
    svc = container.user_service
    user = svc.create_user(_user())

    updated = svc.update_user(user.user_id, {"password": "changed-pw", "email": "acc@school.com"})

    assert updated.full_name == "Accounts Desk"
    assert updated.email == "acc@school.com"
    assert updated.created_at == user.created_at
    assert container.auth_service.authenticate("accounts", "changed-pw") == updated
    with pytest.raises(AuthenticationError):
        container.auth_service.authenticate("accounts", "s3cret!")


def test_user_validation(container):
    svc = container.user_service
    with pytest.raises(ValidationError):
        svc.create_user(_user(password="123"))
    with pytest.raises(ValidationError):
        svc.create_user(_user(role="Janitor"))
    with pytest.raises(ValidationError):
        svc.create_user(_user(password_hash="x"))
    with pytest.raises(ValidationError, match="Email"):
        svc.create_user(_user(email=12345))
    with pytest.raises(ValidationError, match="Password"):
        svc.create_user(_user(password=1234567))


def test_delete_user(container):
    svc = container.user_service
    user = svc.create_user(_user())

    assert svc.delete_user(user.user_id) is True
    assert svc.get_user(user.user_id) is None
    assert svc.delete_user(user.user_id) is False


def test_seeded_admin_can_authenticate(seeded):
    admin = seeded.auth_service.authenticate("admin", "admin123")

    assert admin.role == Role.ADMINISTRATOR
    with pytest.raises(AuthenticationError):
        seeded.auth_service.authenticate("admin", "wrong")
    with pytest.raises(AuthenticationError):
        seeded.auth_service.authenticate("nobody", "admin123")
    with pytest.raises(AuthenticationError):
        seeded.auth_service.authenticate(12345, "admin123")
    with pytest.raises(AuthenticationError):
        seeded.auth_service.authenticate("admin", None)
