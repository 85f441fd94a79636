"""
Helpers shared by the blueprints: body decoding and bearer authentication.
"""
from __future__ import annotations

import logging
import uuid

from flask import abort, current_app, request
from marshmallow import Schema, ValidationError

from utils.security import AuthError, MissingBearerError, authenticate, get_bearer_token

DECODE_ERROR = "Couldn't decode parameters"
NO_BEARER = "No valid Bearer token in Authorization header"

logger = logging.getLogger("chirpy.auth")


def load_body(schema: Schema) -> dict:
    """
    Decode the JSON request body through schema.
    Malformed JSON or wrong field types are reported as 500, not 400.
    """
    payload = request.get_json(force=True, silent=True)
    if payload is None:
        abort(500, description=DECODE_ERROR)
    try:
        return schema.load(payload)
    except ValidationError:
        abort(500, description=DECODE_ERROR)


def require_user_id() -> uuid.UUID:
    """User id from the bearer access token, or abort with 401."""
    try:
        return authenticate(request.headers, current_app.config["JWT_SECRET"])
    except MissingBearerError:
        abort(401, description=NO_BEARER)
    except AuthError as exc:
        logger.debug("access token rejected: %s", exc)
        abort(401, description="JWT validation failed")


def require_bearer_token() -> str:
    """Raw bearer token (used for refresh tokens), or abort with 401."""
    try:
        return get_bearer_token(request.headers)
    except MissingBearerError:
        abort(401, description=NO_BEARER)
