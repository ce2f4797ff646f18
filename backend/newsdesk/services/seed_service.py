from __future__ import annotations

from dataclasses import dataclass, field

from flask import current_app

from newsdesk import seed_data
from newsdesk.extensions import db, bcrypt
from newsdesk.models.article import Article
from newsdesk.models.author import Author
from newsdesk.models.category import Category
from newsdesk.models.user import User
from newsdesk.utils.slugs import slugify


class SeedError(Exception):
	"""Seeding failed; ``step`` names the step that raised."""

	def __init__(self, step: str, cause: Exception):
		super().__init__(f"Seeding failed at step '{step}': {cause}")
		self.step = step
		self.cause = cause


@dataclass
class SeedReport:
	created: dict = field(default_factory=lambda: {"users": 0, "categories": 0, "authors": 0, "articles": 0})
	updated: dict = field(default_factory=lambda: {"categories": 0})
	deleted: dict = field(default_factory=lambda: {"categories": 0})

	def as_dict(self) -> dict:
		return {"created": dict(self.created), "updated": dict(self.updated), "deleted": dict(self.deleted)}


def _upsert(model, lookup: dict, create: dict, update: dict | None = None):
	"""Match ``model`` by ``lookup``; insert ``create`` when absent, apply ``update`` when present.

	Returns ``(instance, created)``.
	"""

	instance = model.query.filter_by(**lookup).first()
	if instance is None:
		instance = model(**create)
		db.session.add(instance)
		db.session.flush()
		return instance, True

	for key, value in (update or {}).items():
		setattr(instance, key, value)
	db.session.flush()
	return instance, False


def seed_admin_user(report: SeedReport) -> User:
	password = current_app.config["SEED_ADMIN_PASSWORD"]
	user, created = _upsert(
		User,
		{"email": seed_data.ADMIN_EMAIL},
		{
			"email": seed_data.ADMIN_EMAIL,
			"password": bcrypt.generate_password_hash(password).decode("utf-8"),
			"name": seed_data.ADMIN_NAME,
			"role": "ADMIN",
			"status": "ACTIVE",
		},
	)
	if created:
		report.created["users"] += 1
	return user


def delete_obsolete_categories(report: SeedReport) -> int:
	removed = (
		Category.query
		.filter(Category.slug.in_(seed_data.OBSOLETE_CATEGORY_SLUGS))
		.delete(synchronize_session=False)
	)
	report.deleted["categories"] += int(removed or 0)
	return int(removed or 0)


def seed_categories(report: SeedReport) -> dict[str, Category]:
	by_slug: dict[str, Category] = {}
	for row in seed_data.CATEGORIES:
		category, created = _upsert(Category, {"slug": row["slug"]}, dict(row), update=dict(row))
		if created:
			report.created["categories"] += 1
		else:
			report.updated["categories"] += 1
		by_slug[category.slug] = category
	return by_slug


def seed_authors(report: SeedReport) -> dict[str, Author]:
	by_name: dict[str, Author] = {}
	for row in seed_data.AUTHORS:
		author, created = _upsert(Author, {"email": row["email"]}, dict(row))
		if created:
			report.created["authors"] += 1
		by_name[author.name] = author
	return by_name


def seed_articles(
	report: SeedReport,
	categories: dict[str, Category],
	authors: dict[str, Author],
) -> list[Article]:
	articles: list[Article] = []
	for row in seed_data.ARTICLES:
		data = dict(row)
		category = categories[data.pop("category_slug")]
		author = authors[data.pop("author_name")]

		slug = slugify(data["title"])
		data.update(slug=slug, category_id=category.id, author_id=author.id)

		article, created = _upsert(Article, {"slug": slug}, data)
		if created:
			report.created["articles"] += 1
		articles.append(article)
	return articles


def _run_step(name: str, fn, *args):
	try:
		result = fn(*args)
		db.session.commit()
	except Exception as exc:
		db.session.rollback()
		current_app.logger.error("[seed] step=%s failed: %s", name, exc)
		raise SeedError(name, exc) from exc
	current_app.logger.info("[seed] step=%s done", name)
	return result


def run_seed() -> SeedReport:
	"""Populate the fixed admin user, categories, authors and sample articles.

	Every step is an upsert keyed by a unique column (email or slug), so the
	routine can be re-run without duplicating rows. Steps commit one by one;
	the first failure stops the sequence and raises ``SeedError``.
	"""

	report = SeedReport()
	current_app.logger.info("[seed] starting")

	_run_step("admin_user", seed_admin_user, report)
	_run_step("obsolete_categories", delete_obsolete_categories, report)
	categories = _run_step("categories", seed_categories, report)
	authors = _run_step("authors", seed_authors, report)
	_run_step("articles", seed_articles, report, categories, authors)

	current_app.logger.info("[seed] completed %s", report.as_dict())
	return report
