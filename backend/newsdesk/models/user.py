from datetime import datetime

from newsdesk.extensions import db


USER_ROLES = ("ADMIN", "EDITOR", "AUTHOR", "USER")
USER_STATUSES = ("ACTIVE", "INACTIVE", "SUSPENDED")


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    email = db.Column(db.String(255), unique=True, nullable=False)
    # bcrypt hash, never the plain password
    password = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(120), nullable=False)

    role = db.Column(
        db.Enum(*USER_ROLES, name="user_role_enum"),
        default="USER",
        nullable=False,
    )
    status = db.Column(
        db.Enum(*USER_STATUSES, name="user_status_enum"),
        default="ACTIVE",
        nullable=False,
    )

    last_login = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    articles = db.relationship("Article", back_populates="user")

    @property
    def is_active(self) -> bool:
        return self.status == "ACTIVE"

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email} role={self.role}>"
