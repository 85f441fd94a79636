"""
Admin blueprint:
- GET  /admin/metrics  -> HTML page with the /app/ hit count
- POST /admin/reset    -> zero the hit count and delete every user
"""
import logging

from flask import Blueprint, abort, current_app
from sqlalchemy.exc import SQLAlchemyError

from models import queries

bp = Blueprint("admin", __name__, url_prefix="/admin")

logger = logging.getLogger("chirpy.admin")

METRICS_TEMPLATE = (
    "<html><body><h1>Welcome, Chirpy Admin</h1>"
    "<p>Chirpy has been visited {count} times!</p></body></html>"
)


def hit_counter():
    return current_app.extensions["hit_counter"]


@bp.get("/metrics")
def metrics():
    """
    Fileserver hit count
    ---
    tags:
      - Admin
    produces:
      - text/html
    responses:
      200:
        description: HTML page reporting the number of /app/ requests
    """
    body = METRICS_TEMPLATE.format(count=hit_counter().value)
    return body, 200, {"Content-Type": "text/html; charset=utf-8"}


@bp.post("/reset")
def reset():
    """
    Reset hit counter and delete all users
    ---
    tags:
      - Admin
    responses:
      200:
        description: Reset done (PLATFORM=dev)
      403:
        description: Not a dev platform. The users table has still been emptied.
      500:
        description: Could not delete users
    """
    hit_counter().reset()

    # The delete runs before the platform check decides the status code
    try:
        deleted = queries.delete_all_users()
    except SQLAlchemyError:
        logger.exception("user table reset failed")
        abort(500, description="Could not reset user database table")

    is_dev = current_app.config.get("PLATFORM") == "dev"
    if not is_dev:
        logger.warning("reset deleted %d users on platform %r", deleted, current_app.config.get("PLATFORM"))
        return "", 403, {"Content-Type": "text/plain; charset=utf-8"}

    logger.info("reset deleted %d users", deleted)
    return "", 200, {"Content-Type": "text/plain; charset=utf-8"}
