import click
from flask import Flask, jsonify, render_template, request
from flask_sqlalchemy import SQLAlchemy
from config import Config

db = SQLAlchemy()


def _wants_json():
    return request.path.startswith('/api/')


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)

    from taskboard.blueprints.main import main_bp
    from taskboard.blueprints.api import api_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(api_bp, url_prefix='/api')

    from taskboard.errors import KanbanError

    # Error handlers
    @app.errorhandler(KanbanError)
    def kanban_error(error):
        if error.status_code >= 500:
            app.logger.error('%s: %s', error.kind, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found_error(error):
        if _wants_json():
            return jsonify({'error': 'not_found', 'message': 'Resource not found'}), 404
        return render_template('errors/404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        if _wants_json():
            return jsonify({'error': 'method_not_allowed', 'message': 'Method not allowed'}), 405
        return error

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        if _wants_json():
            return jsonify({'error': 'storage_error', 'message': 'Internal server error'}), 500
        return render_template('errors/500.html'), 500

    # Import models to ensure they are registered with SQLAlchemy
    from taskboard.models import BoardDocument
    from taskboard.services.gateway import BoardGateway

    with app.app_context():
        db.create_all()
        if app.config.get('SEED_ON_STARTUP'):
            BoardGateway().seed_if_empty()

    @app.cli.command('seed')
    def seed_command():
        """Seed the database with the demo boards if it is empty."""
        if BoardGateway().seed_if_empty():
            click.echo('Database seeded with initial boards')
        else:
            click.echo('Database already contains boards, skipping seed')

    return app
