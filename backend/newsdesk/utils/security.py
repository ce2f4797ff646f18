from flask_jwt_extended import get_jwt, get_jwt_identity

from newsdesk.extensions import db
from newsdesk.models.user import User
from newsdesk.utils.errors import ApiError

STAFF_ROLES = ("ADMIN", "EDITOR")


def current_role() -> str | None:
	claims = get_jwt() or {}
	role = claims.get("role")
	return str(role).upper() if role else None


def current_user_id() -> int:
	identity = get_jwt_identity()
	try:
		return int(identity)
	except (TypeError, ValueError):
		raise ApiError("Invalid token", 401)


def is_staff() -> bool:
	return current_role() in STAFF_ROLES


def require_roles(*roles: str) -> str:
	"""Abort with 403 unless the JWT carries one of ``roles``.

	Must be called inside a view protected by ``jwt_required``.
	"""

	role = current_role()
	if role not in roles:
		raise ApiError(
			"Not authorized",
			403,
			payload={"code": "ROLE_FORBIDDEN", "required": list(roles)},
		)
	return role


def require_active_user(user_id: int) -> User:
	user: User | None = db.session.get(User, user_id)
	if not user:
		raise ApiError("User not found", 404)
	if not user.is_active:
		raise ApiError("Account inactive", 403)
	return user
