# --- checkout_api/__init__.py ---
import logging
from flask import Flask, jsonify
from .config import Config
from .extensions import db, cors, migrate

def create_app(config_class=Config):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_class)
    config_class.init_app(app)

    logging.getLogger(__name__).setLevel(app.config["LOG_LEVEL"])

    # Init extensions
    db.init_app(app)
    cors.init_app(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}})
    migrate.init_app(app, db)

    # Register blueprints
    from .checkout import bp as checkout_bp; app.register_blueprint(checkout_bp)
    from .coupon import bp as coupon_bp; app.register_blueprint(coupon_bp)

    from .cli import register_cli
    register_cli(app)

    @app.get("/")
    def health():
        return jsonify(ok=True, msg="API running")

    with app.app_context():
        from . import model  # noqa: F401
        db.create_all()

    app.logger.debug("blueprints: %s", sorted(app.blueprints.keys()))
    return app
