from __future__ import annotations

import logging
import uuid

from flask import Blueprint, current_app, jsonify, abort
from sqlalchemy.exc import SQLAlchemyError

from models import queries
from models.schemas.chirp import ChirpCreateSchema, ChirpOutSchema
from api.utils.request_helpers import load_body, require_user_id

bp = Blueprint("chirps", __name__)

logger = logging.getLogger("chirpy.chirps")

create_schema = ChirpCreateSchema()
out_schema = ChirpOutSchema()
out_list_schema = ChirpOutSchema(many=True)


@bp.get("/chirps")
def list_chirps():
    """
    List all chirps, oldest first
    ---
    tags: [Chirps]
    responses:
      200: { description: OK }
      500: { description: Could not read chirps }
    """
    try:
        rows = queries.get_all_chirps()
    except SQLAlchemyError:
        logger.exception("list chirps failed")
        abort(500, description="Couldn't retrieve chirps records")
    return jsonify(out_list_schema.dump(rows)), 200


@bp.get("/chirps/<chirp_id>")
def get_chirp(chirp_id: str):
    """
    Get one chirp
    ---
    tags: [Chirps]
    parameters:
      - in: path
        name: chirp_id
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
      500: { description: chirp_id is not a UUID }
    """
    try:
        chirp_id = str(uuid.UUID(chirp_id))
    except ValueError:
        abort(500, description="Could not parse path value")

    try:
        chirp = queries.get_chirp(chirp_id)
    except SQLAlchemyError:
        logger.exception("get chirp %s failed", chirp_id)
        chirp = None
    if chirp is None:
        abort(404, description="Could not retrieve chirp with given ID")
    return jsonify(out_schema.dump(chirp)), 200


@bp.post("/chirps")
def create_chirp():
    """
    Post a chirp as the authenticated user
    ---
    tags: [Chirps]
    security:
      - Bearer: []
    consumes: [application/json]
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            body: { type: string, maxLength: 140 }
    responses:
      201: { description: Created }
      400: { description: Chirp is too long }
      401: { description: Missing or invalid access token }
    """
    data = load_body(create_schema)
    user_id = require_user_id()

    if len(data["body"]) > current_app.config["CHIRP_MAX_LENGTH"]:
        abort(400, description="Chirp is too long")

    try:
        chirp = queries.create_chirp(data["body"], str(user_id))
    except SQLAlchemyError:
        logger.exception("create chirp for %s failed", user_id)
        abort(500, description="Couldn't create chirp record")

    return jsonify(out_schema.dump(chirp)), 201
