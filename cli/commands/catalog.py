import logging
import os
from pathlib import Path

import click
from core.errors import BookcaseError
from core.sa.database import Database
from core.services import CatalogImporter
from core.services.catalog_importer import read_rows
from ..utils import ProgressTracker, create_progress_bar

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY = "Personal Library"

@click.group()
def catalog():
    """Catalog import commands"""
    pass

@catalog.command(name='import')
@click.argument('csv_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--library', default=lambda: os.getenv('BOOKCASE_LIBRARY', DEFAULT_LIBRARY),
              help='Library to load (created if missing)')
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='Database connection string')
@click.option('--verbose', '-v', is_flag=True, help='Show each row and details of failed rows')
def import_catalog(csv_file: Path, library: str, database_url: str, verbose: bool):
    """Import a catalog spreadsheet exported as CSV
    
    Example:
        bookcase catalog import books.csv --library "Personal Library"
    """
    rows = list(read_rows(csv_file.read_text(encoding='utf-8')))
    if not rows:
        click.echo(click.style("No catalog rows found in ", fg='yellow') + click.style(str(csv_file), fg='cyan'))
        return

    database = Database(database_url)
    database.init_db()
    tracker = ProgressTracker(verbose)

    with database.get_db() as session:
        try:
            importer = CatalogImporter.for_library(session, library)
        except BookcaseError as e:
            raise click.ClickException(e.message)
        click.echo(click.style("Importing into library: ", fg='blue') + click.style(library, fg='cyan'))

        with create_progress_bar(rows, verbose, 'Importing rows', lambda row: row.get('name') or '') as bar:
            for row in bar:
                try:
                    importer.process(row)
                except BookcaseError as e:
                    logger.warning("Row failed: %s", e.message)
                    tracker.add_failed(row, e.message)
                tracker.increment_processed()

    tracker.print_results(importer.results)
