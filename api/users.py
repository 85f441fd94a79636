from __future__ import annotations

import logging

from flask import Blueprint, jsonify, abort
from sqlalchemy.exc import SQLAlchemyError

from models import queries
from models.schemas.user import UserCredentialsSchema, UserOutSchema
from utils.security import hash_password
from api.utils.request_helpers import load_body, require_user_id

bp = Blueprint("users", __name__)

logger = logging.getLogger("chirpy.users")

credentials_schema = UserCredentialsSchema()
user_out_schema = UserOutSchema()


@bp.post("/users")
def create_user():
    """
    Register a new user.
    ---
    tags:
      - Users
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      201:
        description: Created
      500:
        description: Could not decode body or create user (duplicate email included)
    """
    data = load_body(credentials_schema)
    pw_hash = hash_password(data["password"])

    try:
        user = queries.create_user(data["email"], pw_hash)
    except SQLAlchemyError:
        # Duplicate emails land here too and stay a 500
        logger.exception("create user failed")
        abort(500, description="Couldn't create user")

    return jsonify(user_out_schema.dump(user)), 201


@bp.put("/users")
def update_user():
    """
    Update the authenticated user's email and password.
    ---
    tags:
      - Users
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: OK
      401:
        description: Missing or invalid access token
      500:
        description: Could not update user
    """
    data = load_body(credentials_schema)
    user_id = require_user_id()
    pw_hash = hash_password(data["password"])

    try:
        user = queries.update_user(str(user_id), data["email"], pw_hash)
    except SQLAlchemyError:
        logger.exception("update user %s failed", user_id)
        user = None
    if user is None:
        abort(500, description="Error updating user information")

    return jsonify(user_out_schema.dump(user)), 200
