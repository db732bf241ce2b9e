from flask import Flask
from blogcms.extensions import db, migrate, cors
from blogcms.routes import register_routes
from blogcms.utils.http import register_error_handlers


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Models must be imported before create_all / autogenerate sees the metadata
    from blogcms import models  # noqa: F401

    db.init_app(app)
    migrate.init_app(app, db)

    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", ["http://localhost:5173"]),
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    register_routes(app)
    register_error_handlers(app)

    return app
