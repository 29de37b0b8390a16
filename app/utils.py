import math
from functools import wraps
from flask import g, redirect, url_for, request

from app.errors import PermissionDenied
from app.models import ROLE_ADMIN


def is_admin(user):
    if user is None:
        return False
    return user.role == ROLE_ADMIN


def can_edit(user):
    # Only admins may change rosters and depth charts for now
    return is_admin(user)


def login_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if g.get('user') is None:
            return redirect(url_for('auth.login', next=request.path))
        return f(*args, **kwargs)
    return wrapper


def editor_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if g.get('user') is None:
            return redirect(url_for('auth.login', next=request.path))
        if not can_edit(g.user):
            raise PermissionDenied("You don't have permission to make changes")
        return f(*args, **kwargs)
    return wrapper


def admin_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if g.get('user') is None:
            return redirect(url_for('auth.login', next=request.path))
        if not is_admin(g.user):
            raise PermissionDenied('Forbidden: Admin access required')
        return f(*args, **kwargs)
    return wrapper


def parse_int_safe(s):
    if s is None:
        return None
    s = str(s).strip()
    if not s:
        return None
    try:
        return int(s)
    except ValueError:
        return None


def parse_float_safe(s):
    if s is None:
        return None
    s = str(s).strip()
    if not s:
        return None
    try:
        value = float(s)
    except ValueError:
        return None
    return value if math.isfinite(value) else None
