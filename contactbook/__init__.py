"""
Contact Book – a small server-rendered contact manager.

create_app() builds the Flask app: config from the environment (plus any
overrides), one shared ContactStore, the contact routes, and the error
pages that NotFound / InvalidRequest / StoreError turn into.
"""

import atexit
import logging

from flask import Flask, render_template_string, request

from contactbook.config import load_config
from contactbook.db import ContactStore
from contactbook.errors import InvalidRequest, NotFound, StoreError
from contactbook.templates import ERROR_TEMPLATE


def _render_error(status: int, message: str):
    return render_template_string(ERROR_TEMPLATE, title=str(status), status=status, message=message), status


def create_app(config=None, store=None) -> Flask:
    app = Flask(__name__)
    app.config.update(load_config())
    if config:
        app.config.update(config)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    if store is None:
        store = ContactStore(app.config["CONTACTS_DB_PATH"])
        atexit.register(store.close)
    app.extensions["contact_store"] = store

    from contactbook.views import bp

    app.register_blueprint(bp)

    @app.after_request
    def log_request(response):
        app.logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.errorhandler(NotFound)
    def handle_not_found(exc):
        return _render_error(exc.status_code, exc.message)

    @app.errorhandler(404)
    def handle_unknown_route(exc):
        return _render_error(404, "Not Found")

    @app.errorhandler(InvalidRequest)
    def handle_invalid_request(exc):
        app.logger.warning("Rejected request: %s", exc.message)
        return _render_error(exc.status_code, exc.message)

    @app.errorhandler(StoreError)
    def handle_store_error(exc):
        # Details are already logged by the store; the user gets a generic page.
        return _render_error(exc.status_code, "Internal Server Error")

    return app
