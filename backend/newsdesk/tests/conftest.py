from datetime import datetime

import pytest

from sqlalchemy.pool import StaticPool
from flask_jwt_extended import create_access_token

from newsdesk import create_app
from newsdesk.config import TestConfig as BaseTestConfig
from newsdesk.extensions import db, bcrypt

# Register every mapper/table before create_all
import newsdesk.models  # noqa: F401
from newsdesk.models.user import User
from newsdesk.models.category import Category
from newsdesk.models.author import Author
from newsdesk.models.article import Article


class PytestConfig(BaseTestConfig):
	SQLALCHEMY_DATABASE_URI = "sqlite://"
	SQLALCHEMY_ENGINE_OPTIONS = {
		"connect_args": {"check_same_thread": False},
		"poolclass": StaticPool,
	}
	JWT_SECRET_KEY = "test-secret"
	CONTACT_FORWARDING_ENABLED = False
	CONTACT_RECIPIENT = "editor@coimbatoreexpress.com"
	CONTACT_ACK_MS = 5000
	SEED_ADMIN_PASSWORD = "Coimbatore@express$"


@pytest.fixture(scope="session")
def app():
	app = create_app(PytestConfig)
	with app.app_context():
		db.create_all()
		yield app
		db.session.remove()
		db.drop_all()


@pytest.fixture()
def client(app):
	return app.test_client()


@pytest.fixture()
def db_session(app):
	with app.app_context():
		yield db.session
		db.session.rollback()


@pytest.fixture()
def outbox(app, tmp_path, monkeypatch):
	path = tmp_path / "email_outbox.jsonl"
	monkeypatch.setitem(app.config, "MAIL_OUTBOX_PATH", str(path))
	return path


@pytest.fixture()
def make_user(db_session):
	def _make_user(
		email: str,
		name: str = "Test User",
		password: str = "Passw0rd!",
		role: str = "USER",
		status: str = "ACTIVE",
	):
		u = User(
			email=email,
			password=bcrypt.generate_password_hash(password).decode("utf-8"),
			name=name,
			role=role,
			status=status,
		)
		db_session.add(u)
		db_session.commit()
		return u

	return _make_user


@pytest.fixture()
def make_token(app):
	def _make_token(user_id: int, role: str = "USER") -> str:
		with app.app_context():
			return create_access_token(identity=str(user_id), additional_claims={"role": role})

	return _make_token


@pytest.fixture()
def auth_header(make_token):
	def _auth_header(user_id: int, role: str = "USER") -> dict:
		token = make_token(user_id, role=role)
		return {"Authorization": f"Bearer {token}"}

	return _auth_header


@pytest.fixture()
def make_category(db_session):
	def _make_category(name: str = "Test Desk", slug: str | None = None, **extra):
		slug = slug or name.lower().replace(" ", "-")
		existing = Category.query.filter_by(slug=slug).first()
		if existing is not None:
			return existing
		c = Category(name=name, slug=slug, **extra)
		db_session.add(c)
		db_session.commit()
		return c

	return _make_category


@pytest.fixture()
def make_author(db_session):
	def _make_author(email: str, name: str = "Test Reporter", role: str = "REPORTER", status: str = "ACTIVE"):
		a = Author(
			name=name,
			email=email,
			bio="Reports on the city for the test desk.",
			role=role,
			status=status,
		)
		db_session.add(a)
		db_session.commit()
		return a

	return _make_author


@pytest.fixture()
def make_article(db_session, make_category, make_author):
	def _make_article(
		slug: str,
		author: Author | None = None,
		category: Category | None = None,
		status: str = "PUBLISHED",
		views: int = 0,
		user_id: int | None = None,
		published_at: datetime | None = None,
		**extra,
	):
		category = category or make_category()
		author = author or make_author(f"{slug}@reporters.test")
		if published_at is None and status == "PUBLISHED":
			published_at = datetime.utcnow()
		title = extra.pop("title", None) or slug.replace("-", " ").title()
		a = Article(
			title=title,
			slug=slug,
			excerpt="A short summary of the story.",
			content="Body text of the story. " * 5,
			category_id=category.id,
			author_id=author.id,
			user_id=user_id,
			status=status,
			views=views,
			published_at=published_at,
			**extra,
		)
		db_session.add(a)
		db_session.commit()
		return a

	return _make_article
