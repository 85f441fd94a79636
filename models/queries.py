"""
Persistence gateway: one function per statement the API needs.

Each function commits its own unit of work; nothing here spans entities in a
single transaction. SQLAlchemyError propagates to the caller after rollback.
"""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from models import storage
from models.base_model import utcnow
from models.chirp import Chirp
from models.refresh_token import RefreshToken
from models.user import User


# users

def create_user(email: str, hashed_password: str) -> User:
    user = User(email=email, hashed_password=hashed_password)
    storage.new(user)
    storage.save()
    return user


def get_user(user_id: str) -> Optional[User]:
    return storage.get(User, str(user_id))


def get_user_by_email(email: str) -> Optional[User]:
    session = storage.get_session()
    return session.query(User).filter(User.email == email).first()


def update_user(user_id: str, email: str, hashed_password: str) -> Optional[User]:
    """Overwrite email and password; None when the user no longer exists."""
    user = get_user(user_id)
    if user is None:
        return None
    user.email = email
    user.hashed_password = hashed_password
    user.save()
    return user


def delete_all_users() -> int:
    """Delete every user; chirps and refresh tokens go with them (ON DELETE CASCADE)."""
    session = storage.get_session()
    deleted = session.query(User).delete(synchronize_session=False)
    storage.save()
    return deleted


# chirps

def create_chirp(body: str, user_id: str) -> Chirp:
    chirp = Chirp(body=body, user_id=str(user_id))
    storage.new(chirp)
    storage.save()
    return chirp


def get_all_chirps() -> List[Chirp]:
    session = storage.get_session()
    return session.query(Chirp).order_by(Chirp.created_at.asc()).all()


def get_chirp(chirp_id: str) -> Optional[Chirp]:
    return storage.get(Chirp, str(chirp_id))


# refresh tokens

def create_refresh_token(token: str, user_id: str, expires_at: datetime) -> RefreshToken:
    rt = RefreshToken(token=token, user_id=str(user_id), expires_at=expires_at)
    storage.new(rt)
    storage.save()
    return rt


def get_refresh_token(token: str) -> Optional[RefreshToken]:
    return storage.get(RefreshToken, token)


def revoke_refresh_token(token: str) -> None:
    now = utcnow()
    session = storage.get_session()
    session.query(RefreshToken).filter(RefreshToken.token == token).update(
        {RefreshToken.revoked_at: now, RefreshToken.updated_at: now},
        synchronize_session="fetch",
    )
    storage.save()
