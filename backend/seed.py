"""
One-shot database seeding: admin user, categories, authors and sample articles.

    python seed.py

Safe to run repeatedly; rows are matched by email or slug. Exits 1 on failure.
"""
import sys

from wsgi import app
from newsdesk.cli import execute_seed


def main() -> int:
    with app.app_context():
        return execute_seed()


if __name__ == "__main__":
    sys.exit(main())
