# webhook_listener/__init__.py
import logging
import uuid
from flask import Flask
from .config import Config
from .models import utcnow
from .store import build_store

def create_app(config=None, store=None, id_factory=None, clock=None):
    app = Flask(__name__)
    app.config.from_object(config or Config)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    if store is None:
        store = build_store(
            app.config.get("TABLE_NAME"),
            database_url=app.config.get("DATABASE_URL"),
            region_name=app.config.get("AWS_REGION"),
        )

    app.extensions["webhook_listener"] = {
        "store": store,
        "id_factory": id_factory or (lambda: str(uuid.uuid4())),
        "clock": clock or utcnow,
    }

    from .app import bp as main_bp
    app.register_blueprint(main_bp)

    return app
