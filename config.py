import os
from datetime import timedelta

basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'special-teams-session-secret'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'app.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session cookie: HttpOnly, 30 days
    SESSION_COOKIE_NAME = 'special_teams_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', '').lower() in ('1', 'true', 'yes')
    PERMANENT_SESSION_LIFETIME = timedelta(days=30)

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Custom config
    SEED_ADMIN_EMAIL = os.environ.get('SEED_ADMIN_EMAIL', 'admin@example.com')
    SEED_ADMIN_PASS = os.environ.get('SEED_ADMIN_PASS', 'admin123')
    SEED_VIEWER_EMAIL = os.environ.get('SEED_VIEWER_EMAIL', 'viewer@example.com')
    SEED_VIEWER_PASS = os.environ.get('SEED_VIEWER_PASS', 'viewer123')
