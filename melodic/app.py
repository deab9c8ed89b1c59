"""
Application factory
"""

# Python Packages
import logging

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import api
from .config.urls import URLs
from .config.database import init_db, db





def configure_logging():
    """
    Root logging setup, driven by LOG_LEVEL
    """

    logging.basicConfig(
        level = getattr(logging, constants.LOG_LEVEL.upper(), logging.INFO),
        format = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt = "%Y-%m-%d %H:%M:%S"
    )



def create_app():
    """
    Application Factory
    """

    configure_logging()

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS
    CORS(app)

    # Initialize Swagger
    api.init_app(app)

    # Register Namespaces
    URLs.add_namespaces()

    return app



# Create app instance for Flask CLI
app = create_app()


if __name__ == "__main__":
    app.run(host = "0.0.0.0", port = 5000)
