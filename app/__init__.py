import click
from flask import Flask, g, jsonify, render_template, request
from config import Config
from app.extensions import db
from app.errors import DepthChartError
from app.utils import can_edit, is_admin

# Endpoints that always answer with a JSON payload
JSON_ENDPOINTS = {'depth_charts.update'}


def _wants_json():
    if request.endpoint in JSON_ENDPOINTS:
        return True
    accept = request.accept_mimetypes
    return accept.accept_json and not accept.accept_html


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize Flask extensions
    db.init_app(app)

    # Register Blueprints
    from app.routes import main, auth, depth_charts, roster, admin
    app.register_blueprint(main.bp)
    app.register_blueprint(auth.bp)
    app.register_blueprint(depth_charts.bp)
    app.register_blueprint(roster.bp)
    app.register_blueprint(admin.bp)

    @app.errorhandler(DepthChartError)
    def handle_depth_chart_error(e):
        app.logger.info('%s %s -> %s: %s', request.method, request.path, e.status_code, e.message)
        if _wants_json():
            return jsonify({'error': e.message}), e.status_code
        return render_template('error.html', message=e.message), e.status_code

    @app.errorhandler(404)
    def not_found(e):
        return render_template('404.html'), 404

    @app.context_processor
    def inject_user():
        user = g.get('user')
        return {'current_user': user, 'user_is_admin': is_admin(user), 'user_can_edit': can_edit(user)}

    # Create tables if they don't exist
    with app.app_context():
        db.create_all()

    from app.models import ROLES, ROLE_VIEWER
    from app.services import create_user, seed_users

    @app.cli.command('init-db')
    def init_db_command():
        """Create all database tables."""
        db.create_all()
        print('Initialized the database.')

    @app.cli.command('seed-users')
    def seed_users_command():
        """Create the default admin and viewer accounts if there are no users."""
        created = seed_users()
        if not created:
            print('Users already exist, skipping user seed')
            return
        print('Created default users:')
        for user in created:
            print(f'  {user.role.title()}: {user.email}')

    @app.cli.command('create-user')
    @click.argument('email')
    @click.argument('username')
    @click.password_option()
    @click.option('--role', type=click.Choice(ROLES), default=ROLE_VIEWER)
    def create_user_command(email, username, password, role):
        """Create a user account."""
        try:
            user = create_user(email, username, password, role)
        except DepthChartError as e:
            raise click.ClickException(e.message)
        print(f'Created {user.role} user {user.username}.')

    return app
