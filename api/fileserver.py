"""
Static files under /app/, counted by the admin hit counter.
"""
from flask import Blueprint, current_app, send_from_directory

bp = Blueprint("fileserver", __name__, url_prefix="/app")


@bp.before_request
def count_hit():
    # Counted before lookup, so misses (404) count too
    current_app.extensions["hit_counter"].increment()


@bp.get("/", defaults={"filename": "index.html"})
@bp.get("/<path:filename>")
def serve(filename: str):
    """
    Serve a file from FILESERVER_ROOT
    ---
    tags:
      - App
    parameters:
      - in: path
        name: filename
        type: string
        required: true
    responses:
      200: { description: File contents }
      404: { description: No such file }
    """
    if filename.endswith("/"):
        filename += "index.html"
    return send_from_directory(current_app.config["FILESERVER_ROOT"], filename)
