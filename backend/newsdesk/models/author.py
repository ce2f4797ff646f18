import json
from datetime import datetime

from newsdesk.extensions import db


AUTHOR_ROLES = ("ADMIN", "EDITOR", "AUTHOR", "REPORTER")
AUTHOR_STATUSES = ("ACTIVE", "INACTIVE", "SUSPENDED")


class Author(db.Model):
    __tablename__ = "authors"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    phone = db.Column(db.String(30), nullable=True)
    bio = db.Column(db.Text, nullable=True)
    avatar = db.Column(db.String(500), nullable=True)

    role = db.Column(
        db.Enum(*AUTHOR_ROLES, name="author_role_enum"),
        default="AUTHOR",
        nullable=False,
    )

    # Comma-separated list and JSON object, both as text
    specialties = db.Column(db.Text, nullable=True)
    social_links = db.Column(db.Text, nullable=True)

    location = db.Column(db.String(120), nullable=True)
    verified = db.Column(db.Boolean, default=False, nullable=False)
    status = db.Column(
        db.Enum(*AUTHOR_STATUSES, name="author_status_enum"),
        default="ACTIVE",
        nullable=False,
    )

    last_active = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    articles = db.relationship(
        "Article",
        back_populates="author",
    )

    @property
    def specialties_list(self) -> list[str]:
        return [s.strip() for s in (self.specialties or "").split(",") if s.strip()]

    @property
    def social_links_dict(self) -> dict:
        if not self.social_links:
            return {}
        try:
            data = json.loads(self.social_links)
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def __repr__(self) -> str:
        return f"<Author id={self.id} email={self.email}>"
