"""create users, categories, authors, articles

Revision ID: 20251107_0001
Revises:
Create Date: 2025-11-07

"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


revision = "20251107_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = inspect(bind)
    tables = set(insp.get_table_names())

    if "users" not in tables:
        op.create_table(
            "users",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("email", sa.String(length=255), nullable=False, unique=True),
            sa.Column("password", sa.String(length=255), nullable=False),
            sa.Column("name", sa.String(length=120), nullable=False),
            sa.Column("role", sa.Enum("ADMIN", "EDITOR", "AUTHOR", "USER", name="user_role_enum"), nullable=False),
            sa.Column("status", sa.Enum("ACTIVE", "INACTIVE", "SUSPENDED", name="user_status_enum"), nullable=False),
            sa.Column("last_login", sa.DateTime(), nullable=True),
            sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
            sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        )

    if "categories" not in tables:
        op.create_table(
            "categories",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("name", sa.String(length=100), nullable=False, unique=True),
            sa.Column("slug", sa.String(length=120), nullable=False, unique=True),
            sa.Column("description", sa.String(length=500), nullable=True),
            sa.Column("color", sa.String(length=7), nullable=True),
            sa.Column("icon", sa.String(length=60), nullable=True),
            sa.Column("is_active", sa.Boolean(), server_default=sa.text("1"), nullable=False),
            sa.Column("sort_order", sa.Integer(), server_default=sa.text("0"), nullable=False),
            sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
            sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        )

    if "authors" not in tables:
        op.create_table(
            "authors",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("name", sa.String(length=120), nullable=False),
            sa.Column("email", sa.String(length=255), nullable=False, unique=True),
            sa.Column("phone", sa.String(length=30), nullable=True),
            sa.Column("bio", sa.Text(), nullable=True),
            sa.Column("avatar", sa.String(length=500), nullable=True),
            sa.Column("role", sa.Enum("ADMIN", "EDITOR", "AUTHOR", "REPORTER", name="author_role_enum"), nullable=False),
            sa.Column("specialties", sa.Text(), nullable=True),
            sa.Column("social_links", sa.Text(), nullable=True),
            sa.Column("location", sa.String(length=120), nullable=True),
            sa.Column("verified", sa.Boolean(), server_default=sa.text("0"), nullable=False),
            sa.Column("status", sa.Enum("ACTIVE", "INACTIVE", "SUSPENDED", name="author_status_enum"), nullable=False),
            sa.Column("last_active", sa.DateTime(), nullable=True),
            sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
            sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
        )

    if "articles" not in tables:
        op.create_table(
            "articles",
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column("title", sa.String(length=200), nullable=False),
            sa.Column("slug", sa.String(length=220), nullable=False, unique=True),
            sa.Column("excerpt", sa.String(length=500), nullable=False),
            sa.Column("content", sa.Text(), nullable=False),
            sa.Column("category_id", sa.Integer(), nullable=False),
            sa.Column("author_id", sa.Integer(), nullable=False),
            sa.Column("user_id", sa.Integer(), nullable=True),
            sa.Column("featured_image", sa.String(length=500), nullable=True),
            sa.Column(
                "status",
                sa.Enum("DRAFT", "REVIEW", "PUBLISHED", "ARCHIVED", name="article_status_enum"),
                nullable=False,
            ),
            sa.Column("is_featured", sa.Boolean(), server_default=sa.text("0"), nullable=False),
            sa.Column("is_breaking", sa.Boolean(), server_default=sa.text("0"), nullable=False),
            sa.Column("published_at", sa.DateTime(), nullable=True),
            sa.Column("scheduled_for", sa.DateTime(), nullable=True),
            sa.Column("views", sa.Integer(), server_default=sa.text("0"), nullable=False),
            sa.Column("seo_title", sa.String(length=200), nullable=True),
            sa.Column("seo_description", sa.String(length=500), nullable=True),
            sa.Column("seo_keywords", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
            sa.Column("updated_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=False),
            sa.ForeignKeyConstraint(["category_id"], ["categories.id"], ondelete="RESTRICT"),
            sa.ForeignKeyConstraint(["author_id"], ["authors.id"], ondelete="RESTRICT"),
            sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="SET NULL"),
        )
        op.create_index("ix_articles_category_id", "articles", ["category_id"], unique=False)
        op.create_index("ix_articles_author_id", "articles", ["author_id"], unique=False)
        op.create_index("ix_articles_status", "articles", ["status"], unique=False)
        op.create_index("ix_articles_published_at", "articles", ["published_at"], unique=False)


def downgrade():
    bind = op.get_bind()
    insp = inspect(bind)
    tables = set(insp.get_table_names())

    if "articles" in tables:
        for name in (
            "ix_articles_published_at",
            "ix_articles_status",
            "ix_articles_author_id",
            "ix_articles_category_id",
        ):
            op.drop_index(name, table_name="articles")
        op.drop_table("articles")

    for table in ("authors", "categories", "users"):
        if table in tables:
            op.drop_table(table)
