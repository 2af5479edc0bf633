import click
from flask import current_app
from flask.cli import with_appcontext

from app.services.export import DashboardExportService


@click.command('cleanup-exports')
@click.option('--days', type=int, default=None,
              help='Delete stored exports older than this many days (defaults to EXPORT_RETENTION_DAYS).')
@with_appcontext
def cleanup_exports(days):
    """
    Removes stored dashboard and widget export files that are older than the
    retention window.
    """
    if days is None:
        days = current_app.config.get('EXPORT_RETENTION_DAYS', 7)
    if days < 0:
        raise click.BadParameter('must be zero or more', param_hint='--days')

    folder = current_app.config['EXPORT_FOLDER']
    click.echo(f"Cleaning exports older than {days} days in {folder}...")
    deleted = DashboardExportService.cleanup_old_exports(folder, days_old=days)
    click.echo(f"Deleted {deleted} export file(s).")
