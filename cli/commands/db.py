import click
from core.sa.database import Database

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='Database connection string')
def init(database_url: str):
    """Create any missing tables"""
    database = Database(database_url)
    database.init_db()
    click.echo(click.style("Database ready: ", fg='green') +
               click.style(database.engine.url.render_as_string(hide_password=True), fg='cyan'))

@db.command()
@click.option('--database-url', envvar='DATABASE_URL', default=None, help='Database connection string')
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
def resync(database_url: str, yes: bool):
    """Drop and recreate every table, deleting all catalog data"""
    if not yes:
        click.confirm(click.style("This deletes every Library and its catalog. Continue?", fg='yellow'), abort=True)
    database = Database(database_url)
    database.resync()
    click.echo(click.style("Resynchronized database tables", fg='green'))
