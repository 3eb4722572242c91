# cli/main.py
import logging

import click
from .commands.catalog import catalog
from .commands.db import db
from .commands.serve import serve

@click.group()
@click.option('--log-level', default='WARNING', envvar='BOOKCASE_LOG_LEVEL', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level for catalog operations')
def cli(log_level: str):
    """Bookcase catalog CLI"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

cli.add_command(catalog)
cli.add_command(db)
cli.add_command(serve)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
