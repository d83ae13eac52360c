import logging
from flask import Flask
from flask_cors import CORS
from config import Config
from routes.api import api_bp
from routes.views import views_bp
from services.todoApi import TodoApi

logger = logging.getLogger(__name__)


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if isinstance(config_object, dict):
        app.config.update(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not app.config.get("SECRET_KEY"):
        logger.warning("SECRET_KEY is not set; sessions will not work until it is configured")

    CORS(app, resources={r"/api/*": {"origins": "*"}})

    app.extensions["todo_api"] = TodoApi(
        base_url=app.config["TODO_API_BASE_URL"],
        timeout=app.config["TODO_API_TIMEOUT"],
        max_workers=app.config["CLEAR_ALL_MAX_WORKERS"],
    )
    logger.debug("Remote to-do service: %s", app.config["TODO_API_BASE_URL"])

    app.register_blueprint(api_bp)
    app.register_blueprint(views_bp)
    return app

app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
