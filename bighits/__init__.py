"""
BigHits - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask

from bighits.config import Config
from bighits.extensions import db, login_manager
from bighits.logging_config import setup_logging


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    setup_logging(app.config.get('LOG_LEVEL', 'INFO'), app.config.get('LOG_FILE'))

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.signin'
    login_manager.login_message_category = 'info'

    _register_admin_services(app)

    # Register blueprints
    from bighits.auth import auth_bp
    from bighits.admin import admin_bp
    from bighits.public import public_bp

    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(public_bp)

    @app.context_processor
    def inject_session_flags():
        """Expose the admin flag to every template."""
        session = app.extensions['session_provider'].current()
        return dict(is_admin=session.user is not None and session.user.role == 'admin')

    @login_manager.user_loader
    def load_user(user_id):
        from bighits.models import User
        return db.session.get(User, int(user_id))

    # Create database tables
    with app.app_context():
        os.makedirs(app.instance_path, exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    app.logger.info('BigHits app created (%s)', config_class.__name__)
    return app


def _register_admin_services(app):
    """Collaborators the admin views receive instead of reaching for globals."""
    from bighits.core import AccessGuard, SQLAlchemyDataSource
    from bighits.core.session import FlaskLoginSessionProvider
    from bighits.models import Blog, Product, Tutor

    app.extensions['access_guard'] = AccessGuard(
        signin_path=app.config['SIGNIN_PATH'],
        home_path=app.config['HOME_PATH'],
    )
    app.extensions['session_provider'] = FlaskLoginSessionProvider()
    app.extensions['data_sources'] = {
        'blogs': SQLAlchemyDataSource(Blog, db, label='Blog Post'),
        'products': SQLAlchemyDataSource(Product, db, label='Product'),
        'tutors': SQLAlchemyDataSource(Tutor, db, label='Tutor'),
    }


def _ensure_default_data(app):
    """Ensure the admin account and, when enabled, the starter catalog exist."""
    from bighits.seeds import ensure_admin_user, ensure_default_catalog

    ensure_admin_user(app)
    if app.config.get('SEED_DEFAULT_DATA'):
        ensure_default_catalog()
