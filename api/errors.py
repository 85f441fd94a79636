from flask import jsonify
from werkzeug.exceptions import HTTPException
import logging

logger = logging.getLogger("chirpy.errors")


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app):
    # Every abort(code, description=...) lands here, including 404/405 from routing
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        if err.code and err.code >= 500:
            logger.error("%s %s", err.code, err.description)
        return error_response(err.description, err.code or 500)

    # 500 Internal Error (catch-all)
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logger.exception("Unhandled exception", exc_info=err)
        return error_response("Something went wrong", 500)
