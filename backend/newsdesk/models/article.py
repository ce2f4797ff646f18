from datetime import datetime

from newsdesk.extensions import db


ARTICLE_STATUSES = ("DRAFT", "REVIEW", "PUBLISHED", "ARCHIVED")


class Article(db.Model):
    __tablename__ = "articles"

    # =========================
    # Columns
    # =========================

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(220), unique=True, nullable=False)
    excerpt = db.Column(db.String(500), nullable=False)
    content = db.Column(db.Text, nullable=False)

    category_id = db.Column(
        db.Integer,
        db.ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    author_id = db.Column(
        db.Integer,
        db.ForeignKey("authors.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    # Staff account that created the article (null for seeded content)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    featured_image = db.Column(db.String(500), nullable=True)

    status = db.Column(
        db.Enum(*ARTICLE_STATUSES, name="article_status_enum"),
        default="DRAFT",
        nullable=False,
        index=True,
    )
    is_featured = db.Column(db.Boolean, default=False, nullable=False)
    is_breaking = db.Column(db.Boolean, default=False, nullable=False)

    published_at = db.Column(db.DateTime, nullable=True, index=True)
    scheduled_for = db.Column(db.DateTime, nullable=True)
    views = db.Column(db.Integer, default=0, nullable=False)

    seo_title = db.Column(db.String(200), nullable=True)
    seo_description = db.Column(db.String(500), nullable=True)
    seo_keywords = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # =========================
    # Relationships
    # =========================

    category = db.relationship(
        "Category",
        back_populates="articles",
        lazy="joined",
    )

    author = db.relationship(
        "Author",
        back_populates="articles",
        lazy="joined",
    )

    user = db.relationship("User", back_populates="articles")

    @property
    def is_published(self) -> bool:
        return self.status == "PUBLISHED"

    @property
    def seo_keywords_list(self) -> list[str]:
        return [k.strip() for k in (self.seo_keywords or "").split(",") if k.strip()]

    def __repr__(self) -> str:
        return f"<Article id={self.id} slug={self.slug} status={self.status}>"
