from __future__ import annotations

import calendar
import json
from collections import Counter
from datetime import datetime

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError

from newsdesk.extensions import db
from newsdesk.models.article import Article
from newsdesk.models.author import Author
from newsdesk.schemas.article_schemas import ArticleListSchema
from newsdesk.schemas.author_schemas import AuthorSchema
from newsdesk.utils.errors import ApiError
from newsdesk.utils.responses import paginate_args, pagination_block

author_schema = AuthorSchema()
author_list_schema = AuthorSchema(many=True)
article_list_schema = ArticleListSchema(many=True)

STATS_WINDOW_MONTHS = 6


def _published_count(author_id: int) -> int:
	return (
		db.session.query(func.count(Article.id))
		.filter(Article.author_id == author_id, Article.status == "PUBLISHED")
		.scalar()
		or 0
	)


def months_before(moment: datetime, months: int) -> datetime:
	"""Same day and time ``months`` calendar months earlier, clamped to the month end."""
	index = moment.year * 12 + (moment.month - 1) - months
	year, month = divmod(index, 12)
	month += 1
	day = min(moment.day, calendar.monthrange(year, month)[1])
	return moment.replace(year=year, month=month, day=day)


def _get_or_404(author_id: int) -> Author:
	author = db.session.get(Author, author_id)
	if not author:
		raise ApiError("Author not found", 404)
	return author


def _email_taken(email: str, exclude_id: int | None = None) -> bool:
	query = Author.query.filter(Author.email == email)
	if exclude_id is not None:
		query = query.filter(Author.id != exclude_id)
	return query.first() is not None


def list_authors(search: str | None, role: str | None, status: str | None, page=1, limit=20) -> dict:
	page_int, limit_int = paginate_args(page, limit, default_limit=20, max_limit=100)

	query = Author.query
	if search:
		s = f"%{str(search).strip()}%"
		query = query.filter(or_(Author.name.ilike(s), Author.email.ilike(s), Author.bio.ilike(s)))
	if role:
		query = query.filter(Author.role == str(role).upper())
	query = query.filter(Author.status == (str(status).upper() if status else "ACTIVE"))

	total = query.count()
	authors = (
		query.order_by(Author.name.asc())
		.offset((page_int - 1) * limit_int)
		.limit(limit_int)
		.all()
	)
	for a in authors:
		a.article_count = _published_count(a.id)

	return {
		"authors": author_list_schema.dump(authors),
		"pagination": pagination_block(page_int, limit_int, total, total_key="total_authors"),
	}


def get_author(author_id: int) -> dict:
	author = _get_or_404(author_id)
	articles = (
		Article.query
		.filter(Article.author_id == author.id, Article.status == "PUBLISHED")
		.order_by(Article.published_at.desc())
		.limit(10)
		.all()
	)
	author.article_count = _published_count(author.id)

	data = author_schema.dump(author)
	data["articles"] = article_list_schema.dump(articles)
	return data


def author_stats(author_id: int, now: datetime | None = None) -> dict:
	author = _get_or_404(author_id)
	published = (
		Article.query
		.filter(Article.author_id == author.id, Article.status == "PUBLISHED")
		.all()
	)

	total_articles = len(published)
	total_views = sum(int(a.views or 0) for a in published)
	average_views = round(total_views / total_articles) if total_articles else 0

	since = months_before(now or datetime.utcnow(), STATS_WINDOW_MONTHS)
	by_month = Counter(
		a.published_at.strftime("%Y-%m")
		for a in published
		if a.published_at is not None and a.published_at >= since
	)

	return {
		"total_articles": total_articles,
		"total_views": total_views,
		"average_views": average_views,
		"articles_by_month": dict(sorted(by_month.items())),
	}


def create_author(data: dict) -> dict:
	email = data["email"].lower().strip()
	if _email_taken(email):
		raise ApiError("Author already exists with this email", 400)

	author = Author(
		name=data["name"].strip(),
		email=email,
		phone=data.get("phone"),
		bio=data["bio"].strip(),
		avatar=data.get("avatar"),
		role=data.get("role") or "AUTHOR",
		specialties=",".join(s.strip() for s in data.get("specialties") or [] if s.strip()),
		social_links=json.dumps(data["social_links"]) if data.get("social_links") else None,
		location=data.get("location"),
		verified=bool(data.get("verified", False)),
	)
	db.session.add(author)
	try:
		db.session.commit()
	except IntegrityError:
		db.session.rollback()
		raise ApiError("Author already exists with this email", 400)

	author.article_count = 0
	return author_schema.dump(author)


def update_author(author_id: int, data: dict) -> dict:
	author = _get_or_404(author_id)

	if "email" in data:
		email = data["email"].lower().strip()
		if email != author.email and _email_taken(email, exclude_id=author.id):
			raise ApiError("Author already exists with this email", 400)
		author.email = email

	if "name" in data:
		author.name = data["name"].strip()
	if "bio" in data:
		author.bio = data["bio"].strip()
	if "specialties" in data:
		author.specialties = ",".join(s.strip() for s in data["specialties"] or [] if s.strip())
	if "social_links" in data:
		author.social_links = json.dumps(data["social_links"]) if data["social_links"] else None

	for key in ("phone", "avatar", "role", "location", "verified", "status"):
		if key in data:
			setattr(author, key, data[key])

	author.last_active = datetime.utcnow()

	try:
		db.session.commit()
	except IntegrityError:
		db.session.rollback()
		raise ApiError("Author already exists with this email", 400)

	author.article_count = _published_count(author.id)
	return author_schema.dump(author)


def delete_author(author_id: int) -> None:
	author = _get_or_404(author_id)

	in_use = db.session.query(func.count(Article.id)).filter(Article.author_id == author.id).scalar() or 0
	if in_use:
		raise ApiError(
			"Cannot delete author with articles. Please reassign or delete articles first.",
			400,
		)

	db.session.delete(author)
	db.session.commit()
