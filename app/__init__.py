"""
Main Flask application factory.
"""
import logging
from pathlib import Path

from flask import Flask
from flask_cors import CORS

from app.config import Config
from app.database import Database
from app.services import UserService

BASE_DIR = Path(__file__).resolve().parent
TEMPLATE_DIR = BASE_DIR / "templates"


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__, template_folder=str(TEMPLATE_DIR))
    app.config.from_object(config_class)

    CORS(app, resources={r"/*": {"origins": app.config['CORS_ORIGINS']}})

    # One pooled store handle per application, shared by all request handlers
    database = Database.from_config(config_class)
    app.extensions['database'] = database
    app.extensions['user_service'] = UserService(database)

    # Register blueprints
    from app.routes.main import main_bp
    from app.routes.users import users_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(users_bp)
    prefix = app.config['API_PREFIX'].rstrip('/')
    if prefix:
        app.register_blueprint(users_bp, url_prefix=prefix, name='users_api')

    try:
        database.init_db()
    except Exception as e:
        logging.error(f"Error initializing database: {e}", exc_info=True)
        # Don't crash the app - let it start and handle errors at request time

    return app
