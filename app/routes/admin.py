from flask import Blueprint, render_template, request

from app.errors import DepthChartError
from app.models import ROLES, ROLE_VIEWER
from app.services import change_password, create_user, list_users, update_user_role
from app.utils import admin_required, parse_int_safe

bp = Blueprint('admin', __name__, url_prefix='/admin')


def _render(status=200, **messages):
    return render_template('admin.html', users=list_users(), roles=ROLES, **messages), status


@bp.route('', methods=['GET'])
@admin_required
def index():
    return _render()


@bp.route('', methods=['POST'])
@admin_required
def index_post():
    action = request.form.get('_action')

    if action == 'updateRole':
        user_id = parse_int_safe(request.form.get('userId'))
        role = request.form.get('role', '')
        if user_id is None or role not in ROLES:
            return _render(400, error='Invalid form data')
        try:
            update_user_role(user_id, role)
        except DepthChartError as e:
            return _render(e.status_code, error=e.message)
        return _render(success='User role updated successfully')

    if action == 'changePassword':
        user_id = parse_int_safe(request.form.get('userId'))
        if user_id is None:
            return _render(400, error='Invalid form data')
        try:
            change_password(user_id, request.form.get('password', ''))
        except DepthChartError as e:
            return _render(e.status_code, error=e.message)
        return _render(success='Password changed successfully')

    if action == 'createUser':
        try:
            user = create_user(
                request.form.get('email', '').strip(),
                request.form.get('username', ''),
                request.form.get('password', ''),
                request.form.get('newUserRole', ROLE_VIEWER),
            )
        except DepthChartError as e:
            return _render(e.status_code, create_error=e.message)
        return _render(success=f'User {user.username} created successfully')

    return _render(400, error='Invalid action')
