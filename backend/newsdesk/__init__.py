import logging

import pymysql
pymysql.install_as_MySQLdb()
from flask import Flask
from flask_cors import CORS

from .config import DevConfig
from .extensions import db, migrate, jwt, ma, bcrypt
from .utils.errors import register_error_handlers
from .cli import register_cli
from .api import (
    auth_routes,
    category_routes,
    author_routes,
    article_routes,
    contact_routes,
    user_routes,
)
from .pages import routes as page_routes


def create_app(config_class=DevConfig) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")), logging.INFO))

    # CORS for the browser frontend
    CORS(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or []}},
        supports_credentials=True,
    )

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    ma.init_app(app)
    bcrypt.init_app(app)

    # Blueprints
    app.register_blueprint(auth_routes.bp, url_prefix="/api/auth")
    app.register_blueprint(category_routes.bp, url_prefix="/api/categories")
    app.register_blueprint(author_routes.bp, url_prefix="/api/authors")
    app.register_blueprint(article_routes.bp, url_prefix="/api/articles")
    app.register_blueprint(contact_routes.bp, url_prefix="/api/contact")
    app.register_blueprint(user_routes.bp, url_prefix="/api/admin/users")
    app.register_blueprint(page_routes.bp)

    register_error_handlers(app)
    register_cli(app)

    @app.get("/api/health")
    def health_check():
        return {"status": "ok", "service": "newsdesk-backend"}

    return app
