from datetime import datetime

from flask_jwt_extended import create_access_token, create_refresh_token

from newsdesk.extensions import db, bcrypt
from newsdesk.models.user import User
from newsdesk.utils.errors import ApiError


def user_to_dict(user: User) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "status": user.status,
        "last_login": user.last_login.isoformat() if user.last_login else None,
    }


def authenticate(email: str, password: str) -> dict:
    normalized = (email or "").lower().strip()
    user = User.query.filter_by(email=normalized).first()

    if not user:
        raise ApiError("Invalid credentials", 401)

    try:
        password_ok = bcrypt.check_password_hash(user.password or "", password)
    except (ValueError, TypeError):
        # Malformed hash counts as a failed check
        raise ApiError("Invalid credentials", 401)

    if not password_ok:
        raise ApiError("Invalid credentials", 401)

    if not user.is_active:
        raise ApiError("Account inactive", 403)

    user.last_login = datetime.utcnow()
    db.session.commit()

    access_token = create_access_token(
        identity=str(user.id),
        additional_claims={"role": user.role},
    )
    refresh_token = create_refresh_token(identity=str(user.id))

    return {
        "access_token": access_token,
        "refresh_token": refresh_token,
        "user": user_to_dict(user),
    }


def refresh_access_token(user_id: int) -> dict:
    """New access token for a refresh-token holder; the role claim is re-read from the user row."""

    user = db.session.get(User, user_id)
    if not user:
        raise ApiError("User not found", 404)
    if not user.is_active:
        raise ApiError("Account inactive", 403)

    access_token = create_access_token(
        identity=str(user.id),
        additional_claims={"role": user.role},
    )
    return {"access_token": access_token, "user": user_to_dict(user)}
