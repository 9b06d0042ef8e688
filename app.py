import sys

import click
from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

import database
from auth import auth_blueprint
from config import Settings, load_settings
from posts import posts_blueprint
from utils.http import text_response
from utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


# ==================================
# Application and Blueprint Setup
# ==================================
def create_app(settings: Settings = None) -> Flask:
    """Build the Flask app; settings are read from the environment unless given."""
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.config['SETTINGS'] = settings

    CORS(app, origins=[settings.cors_origin])

    database.init_pool(settings.database_url, settings.db_pool_min, settings.db_pool_max)

    app.register_blueprint(auth_blueprint, url_prefix='/auth')
    app.register_blueprint(posts_blueprint, url_prefix='/posts')

    @app.route('/health', methods=['GET'])
    def health():
        """Liveness check. Does not touch the database."""
        return text_response('OK')

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return text_response(e.description or e.name, e.code)

    @app.cli.command('init-db')
    def init_db_command():
        """Create the users and posts tables."""
        try:
            database.create_db_tables()
        except database.DatabaseError as e:
            raise click.ClickException(f"Could not create tables: {e}") from e
        click.echo('Database tables created.')

    return app


# -------------------------------------------------------------
# Main Execution Block
# -------------------------------------------------------------
def main() -> int:
    settings = load_settings()
    app = create_app(settings)

    try:
        if not database.check_connection():
            logger.error("DB connection failed. Check DATABASE_URL.")
            return 1
        logger.info("Connected to database successfully!")

        if settings.create_tables:
            database.create_db_tables()
        app.run(host='0.0.0.0', port=settings.port)
    except database.DatabaseError as e:
        logger.error("Could not create tables: %s", e)
        return 1
    finally:
        database.close_pool()
    return 0


if __name__ == '__main__':
    sys.exit(main())
