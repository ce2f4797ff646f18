from __future__ import annotations

from flask import current_app
from sqlalchemy import func, or_, select

from newsdesk.extensions import db
from newsdesk.models.article import Article
from newsdesk.models.user import User
from newsdesk.services.auth_service import user_to_dict
from newsdesk.utils.errors import ApiError
from newsdesk.utils.responses import paginate_args, pagination_block


def _article_count(user_id: int) -> int:
	return (
		db.session.query(func.count(Article.id))
		.filter(Article.user_id == user_id)
		.scalar()
		or 0
	)


def _get_or_404(user_id: int) -> User:
	user = db.session.get(User, user_id)
	if not user:
		raise ApiError("User not found", 404)
	return user


def list_users(search: str | None, role: str | None, status: str | None, page=1, limit=20) -> dict:
	page_int, limit_int = paginate_args(page, limit, default_limit=20, max_limit=100)

	article_count_sq = (
		select(func.count(Article.id))
		.where(Article.user_id == User.id)
		.correlate(User)
		.scalar_subquery()
	)

	query = db.session.query(User, article_count_sq.label("article_count"))
	if search:
		s = f"%{str(search).strip()}%"
		query = query.filter(or_(User.name.ilike(s), User.email.ilike(s)))
	if role:
		query = query.filter(User.role == str(role).upper())
	if status:
		query = query.filter(User.status == str(status).upper())

	total = query.count()
	rows = (
		query.order_by(User.created_at.desc(), User.id.desc())
		.offset((page_int - 1) * limit_int)
		.limit(limit_int)
		.all()
	)

	users: list[dict] = []
	for u, article_count in rows:
		item = user_to_dict(u)
		item["article_count"] = int(article_count or 0)
		users.append(item)

	return {
		"users": users,
		"pagination": pagination_block(page_int, limit_int, total, total_key="total_users"),
	}


def update_user(user_id: int, data: dict) -> dict:
	"""Change a user's role and/or status."""

	user = _get_or_404(user_id)
	if data.get("role"):
		user.role = data["role"]
	if data.get("status"):
		user.status = data["status"]
	db.session.commit()

	current_app.logger.info("[users] updated id=%s role=%s status=%s", user.id, user.role, user.status)
	return user_to_dict(user)


def delete_user(user_id: int) -> None:
	user = _get_or_404(user_id)

	if _article_count(user.id):
		raise ApiError(
			"Cannot delete user with articles. Please reassign or delete articles first.",
			400,
		)

	db.session.delete(user)
	db.session.commit()
	current_app.logger.info("[users] deleted id=%s", user_id)
