"""
Authentication blueprint:
- POST /api/login
- POST /api/refresh
- POST /api/revoke

The implementation:
- Uses argon2 for password hashing (via utils.security)
- Issues 1-hour access tokens (JWTs signed with HS256) and 60-day opaque refresh tokens
- Stores refresh tokens in DB (RefreshToken model) so they can be checked and revoked
- Refresh tokens are not rotated; /refresh only mints a new access token
"""
from __future__ import annotations

import logging
from functools import lru_cache

from flask import Blueprint, jsonify, abort, current_app
from sqlalchemy.exc import SQLAlchemyError

from models import queries
from models.base_model import utcnow
from models.schemas.user import UserCredentialsSchema, LoginOutSchema, TokenOutSchema
from utils.security import (
    hash_password,
    verify_password,
    make_jwt,
    make_refresh_token,
)
from api.utils.request_helpers import load_body, require_bearer_token

bp = Blueprint("auth", __name__)

logger = logging.getLogger("chirpy.auth")

credentials_schema = UserCredentialsSchema()
login_out_schema = LoginOutSchema()
token_out_schema = TokenOutSchema()

BAD_CREDENTIALS = "Incorrect email or password"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Verified against when the email is unknown so both failure paths hash once
    return hash_password("chirpy-unknown-user")


@bp.post("/login")
def login():
    """
    Login: return user profile with access token and refresh token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns user, token, refresh_token)
      401:
        description: Incorrect email or password
    """
    data = load_body(credentials_schema)

    try:
        user = queries.get_user_by_email(data["email"])
    except SQLAlchemyError:
        logger.exception("user lookup failed")
        user = None

    if user is None:
        verify_password(data["password"], _dummy_hash())
        logger.info("login failed: unknown email")
        abort(401, description=BAD_CREDENTIALS)
    if not verify_password(data["password"], user.hashed_password):
        logger.info("login failed: bad password for user %s", user.id)
        abort(401, description=BAD_CREDENTIALS)

    cfg = current_app.config
    token = make_jwt(user.id, cfg["JWT_SECRET"], cfg["ACCESS_TOKEN_EXPIRES"])
    refresh_token = make_refresh_token()

    try:
        queries.create_refresh_token(refresh_token, user.id, utcnow() + cfg["REFRESH_TOKEN_EXPIRES"])
    except SQLAlchemyError:
        logger.exception("storing refresh token for %s failed", user.id)
        abort(500, description="Error adding refresh token to database")

    payload = login_out_schema.dump(
        {
            "id": user.id,
            "created_at": user.created_at,
            "updated_at": user.updated_at,
            "email": user.email,
            "token": token,
            "refresh_token": refresh_token,
        }
    )
    return jsonify(payload), 200


@bp.post("/refresh")
def refresh():
    """
    Exchange a refresh token for a new access token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK (returns token)
      401:
        description: Refresh token missing, unknown, expired or revoked
    """
    token = require_bearer_token()

    try:
        rt = queries.get_refresh_token(token)
    except SQLAlchemyError:
        logger.exception("refresh token lookup failed")
        rt = None
    if rt is None:
        abort(401, description="Refresh token not found in database")
    if rt.is_expired():
        abort(401, description="Refresh token is expired")
    if rt.is_revoked:
        abort(401, description="Refresh token is revoked")

    cfg = current_app.config
    access_token = make_jwt(rt.user_id, cfg["JWT_SECRET"], cfg["ACCESS_TOKEN_EXPIRES"])
    return jsonify(token_out_schema.dump({"token": access_token})), 200


@bp.post("/revoke")
def revoke():
    """
    revoke: marks the bearer refresh token as revoked
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: ""
      401:
        description: Refresh token missing or unknown
    """
    token = require_bearer_token()

    try:
        rt = queries.get_refresh_token(token)
    except SQLAlchemyError:
        logger.exception("refresh token lookup failed")
        rt = None
    if rt is None:
        abort(401, description="Refresh token not found in database")

    try:
        queries.revoke_refresh_token(token)
    except SQLAlchemyError:
        logger.exception("revoking refresh token for %s failed", rt.user_id)
        abort(500, description="Error revoking refresh token")

    return ("", 204)
