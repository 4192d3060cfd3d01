from flask import Flask

from .controllers.showroom import bp as showroom_bp
from .utils.constants import DEFAULT_FLEET


def create_app(test_config=None):
    app = Flask(__name__, static_folder=None)
    app.config["SHOWROOM_FLEET"] = [dict(e) for e in DEFAULT_FLEET]
    if test_config:
        app.config.update(test_config)
    app.register_blueprint(showroom_bp)
    app.logger.debug("Showroom fleet has %d entries", len(app.config["SHOWROOM_FLEET"]))

    return app
