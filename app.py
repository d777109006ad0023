import logging

import click
from flask import Flask

from config import Config
from errors import register_error_handlers
from extensions import cors, db
from services.chat import GeminiClient
from services.mailer import Mailer
from services.storage import init_storage


def _engine_options(app):
    # SQLite (file or memory) does not take a bounded pool
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite'):
        return {}
    return {
        'pool_size': app.config['DB_POOL_SIZE'],
        'max_overflow': app.config['DB_MAX_OVERFLOW'],
        'pool_timeout': app.config['DB_POOL_TIMEOUT'],
        'pool_pre_ping': True,
    }


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if isinstance(config, dict):
        app.config.update(config)
    elif config is not None:
        app.config.from_object(config)
    app.config.setdefault('SQLALCHEMY_ENGINE_OPTIONS', _engine_options(app))

    logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app.logger.setLevel(app.config['LOG_LEVEL'])
    logging.getLogger('services').setLevel(app.config['LOG_LEVEL'])

    cors.init_app(app, origins=app.config['CORS_ORIGINS'])
    db.init_app(app)

    # Import all models before creating tables
    import models  # noqa: F401

    with app.app_context():
        db.create_all()

    init_storage(app)
    app.extensions['mailer'] = Mailer.from_config(app.config)
    app.extensions['chat_client'] = GeminiClient.from_config(app.config)

    from routes import api_bp
    app.register_blueprint(api_bp)
    register_error_handlers(app)

    @app.cli.command('promote-admin')
    @click.argument('email')
    def promote_admin(email):
        """Give the account registered under EMAIL the admin role."""
        from services.users import promote_to_admin
        from errors import NotFound
        try:
            user = promote_to_admin(email)
        except NotFound as e:
            raise click.ClickException(e.message)
        click.echo(f'{user.email} is now an administrator.')

    return app


if __name__ == '__main__':
    create_app().run(port=3000)
