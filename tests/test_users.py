import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.errors import NotFoundError, ValidationError
from app.extensions import db
from app.models import ROLE_ADMIN, ROLE_VIEWER, User
from app.services import (
    change_password, create_user, get_user_by_email, list_users, seed_users,
    update_user_role, verify_login,
)
from app.utils import can_edit, is_admin


def test_password_is_hashed(app):
    user = create_user('coach@example.com', 'coach', 'whistle1')
    assert user.password_hash != 'whistle1'
    assert user.role == ROLE_VIEWER
    assert verify_login('coach@example.com', 'whistle1').id == user.id
    assert verify_login('coach@example.com', 'wrong-pass') is None
    assert verify_login('nobody@example.com', 'whistle1') is None


@pytest.mark.parametrize('email,username,password,role', [
    ('no-at-sign', 'coach', 'whistle1', ROLE_VIEWER),
    ('coach@example.com', ' ', 'whistle1', ROLE_VIEWER),
    ('coach@example.com', 'coach', 'short', ROLE_VIEWER),
    ('coach@example.com', 'coach', 'whistle1', 'OWNER'),
])
def test_create_user_validation(app, email, username, password, role):
    with pytest.raises(ValidationError):
        create_user(email, username, password, role)


def test_create_user_duplicate(app):
    create_user('coach@example.com', 'coach', 'whistle1')
    with pytest.raises(ValidationError):
        create_user('other@example.com', 'coach', 'whistle1')
    with pytest.raises(ValidationError):
        create_user('coach@example.com', 'other', 'whistle1')


def test_roles(app):
    admin = create_user('a@example.com', 'a', 'password', ROLE_ADMIN)
    viewer = create_user('v@example.com', 'v', 'password', ROLE_VIEWER)
    assert is_admin(admin) and can_edit(admin)
    assert not is_admin(viewer) and not can_edit(viewer)
    assert not can_edit(None)

    update_user_role(viewer.id, ROLE_ADMIN)
    assert can_edit(get_user_by_email('v@example.com'))
    with pytest.raises(NotFoundError):
        update_user_role(999, ROLE_ADMIN)
    with pytest.raises(ValidationError):
        update_user_role(viewer.id, 'OWNER')


def test_change_password(app):
    user = create_user('coach@example.com', 'coach', 'whistle1')
    change_password(user.id, 'newpass1')
    assert verify_login('coach@example.com', 'newpass1') is not None
    with pytest.raises(ValidationError):
        change_password(user.id, '123')


def test_seed_users_only_when_empty(app):
    created = seed_users()
    assert sorted(u.role for u in created) == [ROLE_ADMIN, ROLE_VIEWER]
    assert verify_login('admin@example.com', 'admin123') is not None
    assert seed_users() == []
    assert User.query.count() == 2
    assert [u.username for u in list_users()] == ['admin', 'viewer']


@pytest.mark.parametrize('mutate', [
    lambda user: update_user_role(user.id, ROLE_ADMIN),
    lambda user: change_password(user.id, 'newpass1'),
])
def test_failed_commit_is_rolled_back(app, monkeypatch, mutate):
    user = create_user('coach@example.com', 'coach', 'whistle1')

    def _fail():
        raise SQLAlchemyError('database is locked')

    monkeypatch.setattr(db.session, 'commit', _fail)
    with pytest.raises(SQLAlchemyError):
        mutate(user)
    monkeypatch.undo()

    assert get_user_by_email('coach@example.com').role == ROLE_VIEWER
    assert verify_login('coach@example.com', 'whistle1') is not None
