import click
from flask import current_app
from flask.cli import with_appcontext

from newsdesk import seed_data
from newsdesk.extensions import db
from newsdesk.services.seed_service import SeedError, run_seed


def execute_seed(echo=click.echo) -> int:
    """Run the seed inside the current app context and return a process exit code."""

    echo("🌱 Starting database seeding...")
    try:
        report = run_seed()
    except SeedError as exc:
        current_app.logger.exception(exc)
        echo(f"❌ Error during seeding: {exc}", err=True)
        return 1
    finally:
        db.session.remove()

    echo(f"✅ Admin user ready ({report.created['users']} created)")
    echo(
        f"✅ Categories ready ({report.created['categories']} created, "
        f"{report.updated['categories']} updated, {report.deleted['categories']} removed)"
    )
    echo(f"✅ Authors ready ({report.created['authors']} created)")
    echo(f"✅ Sample articles ready ({report.created['articles']} created)")
    echo("🎉 Database seeding completed successfully!")
    echo("")
    echo("Default admin credentials:")
    echo(f"Email: {seed_data.ADMIN_EMAIL}")
    return 0


@click.command("seed")
@with_appcontext
def seed_command():
    """Insert the admin user, categories, authors and sample articles."""
    code = execute_seed()
    if code:
        raise SystemExit(code)


def register_cli(app) -> None:
    app.cli.add_command(seed_command)
