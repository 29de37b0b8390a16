from flask import Blueprint, render_template, request, session, redirect, url_for, flash, g, current_app

from app.services import get_user_by_id, verify_login
from app.services.users import MIN_PASSWORD_LENGTH

bp = Blueprint('auth', __name__)


@bp.before_app_request
def load_logged_in_user():
    user_id = session.get('user_id')
    g.user = get_user_by_id(user_id) if user_id is not None else None
    if user_id is not None and g.user is None:
        # account was removed since the cookie was issued
        session.clear()


def _safe_next(next_url):
    # only allow local paths
    if next_url and next_url.startswith('/') and not next_url.startswith('//'):
        return next_url
    return url_for('main.index')


@bp.route('/login', methods=['GET', 'POST'])
def login():
    if g.user is not None:
        return redirect(url_for('main.index'))

    next_url = request.args.get('next') or request.form.get('next') or ''
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        pw = request.form.get('password', '')

        field_errors = {}
        if not email or '@' not in email:
            field_errors['email'] = 'Please enter a valid email address'
        if len(pw) < MIN_PASSWORD_LENGTH:
            field_errors['password'] = f'Password must be at least {MIN_PASSWORD_LENGTH} characters'
        if field_errors:
            return render_template('login.html', next=next_url, email=email, field_errors=field_errors), 400

        user = verify_login(email, pw)
        if user is None:
            current_app.logger.warning('Failed login for %s from %s', email, request.remote_addr)
            flash('Invalid email or password', 'error')
            return render_template('login.html', next=next_url, email=email, field_errors={}), 400

        session.clear()
        session.permanent = True
        session['user_id'] = user.id
        current_app.logger.info('User %s logged in', user.username)
        return redirect(_safe_next(next_url))

    return render_template('login.html', next=next_url, email='', field_errors={})


@bp.route('/logout', methods=['GET', 'POST'])
def logout():
    session.clear()
    flash('Logged out', 'info')
    return redirect(url_for('auth.login'))
