from flask import Flask, jsonify
from license_manager.config import Config
from license_manager.extensions import db, migrate, jwt, mail


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # 1) db first; models must be imported before create_all / migrations
    db.init_app(app)
    from license_manager.models import license, supplier, rda, purchase_request  # noqa: F401

    # 2) other extensions
    migrate.init_app(app, db)
    jwt.init_app(app)
    mail.init_app(app)

    # 3) API blueprints
    from license_manager.controllers.auth_controller import auth_bp
    from license_manager.controllers.license_controller import license_bp
    from license_manager.controllers.supplier_controller import supplier_bp
    from license_manager.controllers.rda_controller import rda_bp
    from license_manager.controllers.request_controller import request_bp
    from license_manager.controllers.notification_controller import notif_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(license_bp)
    app.register_blueprint(supplier_bp)
    app.register_blueprint(rda_bp)
    app.register_blueprint(request_bp)
    app.register_blueprint(notif_bp)

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    # Daily expiration check
    from license_manager.tasks.scheduler import start_scheduler
    start_scheduler(app)

    return app
