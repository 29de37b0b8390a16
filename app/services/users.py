from flask import current_app
from sqlalchemy import or_

from app.errors import NotFoundError, ValidationError
from app.extensions import db
from app.models import ROLE_ADMIN, ROLE_VIEWER, ROLES, User

MIN_PASSWORD_LENGTH = 6


def get_user_by_id(user_id):
    return db.session.get(User, user_id)


def get_user_by_email(email):
    return User.query.filter_by(email=email).first()


def list_users():
    return User.query.order_by(User.username.asc()).all()


def verify_login(email, password):
    user = get_user_by_email(email)
    if user is None or not user.check_password(password):
        return None
    return user


def validate_new_user(username, email, password, role):
    if not username or not username.strip() \
            or not email or '@' not in email \
            or not password or len(password) < MIN_PASSWORD_LENGTH \
            or role not in ROLES:
        raise ValidationError('Invalid form data. Ensure all fields are filled correctly '
                              f'and password is at least {MIN_PASSWORD_LENGTH} characters.')


def create_user(email, username, password, role=ROLE_VIEWER):
    validate_new_user(username, email, password, role)
    username = username.strip()
    existing = User.query.filter(or_(User.username == username, User.email == email)).first()
    if existing:
        raise ValidationError('A user with this username or email already exists.')

    user = User(email=email, username=username, role=role)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('Created %s user %s', role, username)
    return user


def update_user_role(user_id, role):
    if role not in ROLES:
        raise ValidationError('Invalid form data')
    user = get_user_by_id(user_id)
    if user is None:
        raise NotFoundError('User not found')
    user.role = role
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('User %s is now %s', user.username, role)
    return user


def change_password(user_id, new_password):
    if not new_password or len(new_password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')
    user = get_user_by_id(user_id)
    if user is None:
        raise NotFoundError('User not found')
    user.set_password(new_password)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    current_app.logger.info('Password changed for %s', user.username)
    return user


def seed_users():
    """Create the default admin and viewer accounts on an empty database.

    Returns the created users, or an empty list when users already exist.
    """
    if User.query.count() > 0:
        return []
    cfg = current_app.config
    return [
        create_user(cfg['SEED_ADMIN_EMAIL'], 'admin', cfg['SEED_ADMIN_PASS'], ROLE_ADMIN),
        create_user(cfg['SEED_VIEWER_EMAIL'], 'viewer', cfg['SEED_VIEWER_PASS'], ROLE_VIEWER),
    ]
