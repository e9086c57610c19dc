import pytest

from libhub.domain.common.exceptions import ValidationError
from libhub.domain.common.value_objects.ids import UserId
from libhub.domain.identity.entities.user import User, UserRole


def _user(user_id: int, role: UserRole = UserRole.MEMBER) -> User:
    user = User.create(username="reader", email="reader@example.com", role=role)
    user.id = UserId(user_id)
    return user


def test_member_accesses_only_own_data():
    member = _user(1)
    assert member.can_access_user_data(UserId(1))
    assert not member.can_access_user_data(UserId(2))


def test_admin_accesses_everyone():
    assert _user(1, UserRole.ADMIN).can_access_user_data(UserId(2))


def test_blank_email_is_rejected():
    with pytest.raises(ValidationError):
        User.create(username="reader", email="")


def test_update_profile_ignores_blank_values():
    user = _user(1)
    user.update_profile(username="  ", email="new@example.com")
    assert user.username == "reader"
    assert user.email == "new@example.com"
